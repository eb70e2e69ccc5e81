"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from bayes_calculator.config import (
    DEFAULT_LOG_LEVEL,
    DESCRIPTION_PROMPT,
    EVIDENCE_PROMPT,
    EXIT_INPUT_CLOSED,
    EXIT_OK,
    LIKELIHOOD_PROMPT,
    LOG_LEVELS,
    PRIOR_PROMPT,
    VERSION,
)
from bayes_calculator.core import CalculationResult, evaluate
from bayes_calculator.prompt import (
    InputClosedError,
    LineSource,
    Writer,
    ask_probability,
    ask_text,
    console_lines,
)
from bayes_calculator.report import (
    render_help,
    render_instructions,
    render_intro,
    render_pipeline_diagram,
    write_report,
)

logger = logging.getLogger(__name__)


def run_session(
    lines: LineSource,
    write: Writer,
    show_intro: bool = True,
) -> CalculationResult:
    """Collect description, prior, likelihood and evidence, then report.

    Raises:
        InputClosedError: if input ends before all answers are collected
    """
    if show_intro:
        write(render_intro())
        write(render_pipeline_diagram())
        write(render_instructions())

    description = ask_text(DESCRIPTION_PROMPT, lines, write)

    answers = {}
    for topic, message in (
        ("prior", PRIOR_PROMPT),
        ("likelihood", LIKELIHOOD_PROMPT),
        ("evidence", EVIDENCE_PROMPT),
    ):
        write("")
        if show_intro:
            write(render_help(topic))
        answers[topic] = ask_probability(message, lines, write)

    write("")
    result = evaluate(description, **answers)
    write_report(result, write)
    return result


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bayes-calculator",
        description="Interactive Bayes' rule calculator: prior x likelihood / evidence",
    )
    parser.add_argument(
        "--no-intro",
        action="store_true",
        help="Skip the welcome text, diagram and per-question help",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging verbosity on stderr (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run_session(console_lines(), print, show_intro=not args.no_intro)
    except InputClosedError as exc:
        logger.error("Input closed before the calculation finished: %s", exc)
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_INPUT_CLOSED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
