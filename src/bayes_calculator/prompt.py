"""Interactive prompts that read answers from a line source.

A line source is any zero-argument callable returning the next line of
input. It raises :class:`InputClosedError` once no more input can be read.
Two sources are provided:

    console_lines(stream)     - reads from a text stream (stdin by default)
    scripted_lines(lines)     - replays a fixed sequence, for tests and scripts

The probability prompt retries without bound until the user gives a valid
percentage, so it only returns early by raising ``InputClosedError``.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, TextIO

from bayes_calculator.config import INVALID_INPUT_MESSAGE
from bayes_calculator.core import ValidationError, require_percentage

logger = logging.getLogger(__name__)

LineSource = Callable[[], str]
Writer = Callable[[str], None]


class InputClosedError(EOFError):
    """Raised when the line source has no more input to give."""


def console_lines(stream: TextIO | None = None) -> LineSource:
    """Return a line source reading one line at a time from *stream*."""

    def read_line() -> str:
        source = stream if stream is not None else sys.stdin
        try:
            line = source.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputClosedError(f"Failed to read line: {exc}") from exc

        # readline() returns "" only at end of input; a blank line is "\n"
        if line == "":
            raise InputClosedError("Failed to read line: end of input")
        return line

    return read_line


def scripted_lines(lines: Iterable[str]) -> LineSource:
    """Return a line source that replays *lines* in order."""
    iterator = iter(lines)

    def read_line() -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise InputClosedError("Scripted input exhausted") from None

    return read_line


def ask_text(message: str, lines: LineSource, write: Writer) -> str:
    """Show *message* and return the next line, stripped."""
    write(message)
    return lines().strip()


def ask_probability(message: str, lines: LineSource, write: Writer) -> float:
    """Prompt until a valid percentage is entered; return it as a fraction.

    Every rejected answer is reported with ``INVALID_INPUT_MESSAGE`` and the
    prompt is shown again.
    """
    attempt = 0
    while True:
        attempt += 1
        write(message)
        answer = lines()
        try:
            return require_percentage(answer)
        except ValidationError as exc:
            logger.debug("Rejected answer on attempt %d: %s", attempt, exc)
            write(INVALID_INPUT_MESSAGE)
