"""Text rendering for the calculator session.

Every ``render_*`` function returns a string and has no side effects, so
output can be asserted on directly. ``write_report`` is the only function
here that writes, and it writes through the callable it is given.
"""

from __future__ import annotations

from typing import Callable

from bayes_calculator.config import (
    DISPLAY_DECIMALS,
    LABEL_COLUMN_WIDTH,
    PERCENT_SCALE,
    PERCENT_SUFFIX,
    VALUE_COLUMN_WIDTH,
)
from bayes_calculator.core import CalculationResult

Writer = Callable[[str], None]

_INTRO = """\
Welcome to the Bayesian Probability Calculator!

Bayesian probability is a powerful approach to update your beliefs based on \
new evidence. It can help you make better decisions under uncertainty.
"""

_PIPELINE_DIAGRAM = """\
+-------------+
| Prior       | ->
| Probability |
+-------------+
    +--------------+
    | Likelihood   | ->
    |  & Evidence  |
    +--------------+
        +--------------+
        | Posterior    |
        | Probability  |
        +--------------+
"""

_INSTRUCTIONS = """\
In the next steps, you'll be asked to provide a description of the event \
you're calculating, as well as three data points: prior probability, \
likelihood, and evidence.
To answer the data points, you can use your own judgment, expert opinions, \
or available data.
"""

_HELP = {
    "prior": (
        "Prior probability represents your initial belief about the probability "
        "of an event, before considering any new evidence.\n"
        "It is a percentage value between 0% (event is impossible) and 100% "
        "(event is certain)."
    ),
    "likelihood": (
        "Likelihood represents how probable the new evidence is, assuming the "
        "event is true.\n"
        "It is a percentage value between 0% (evidence is impossible if the event "
        "is true) and 100% (evidence is certain if the event is true)."
    ),
    "evidence": (
        "Evidence represents the probability of observing the new evidence, "
        "taking into account all possible scenarios.\n"
        "It is a percentage value between 0% (evidence is impossible) and 100% "
        "(evidence is certain)."
    ),
}

_TABLE_LEGEND = """\
In this table, we present four key probabilities based on the data you provided:
  - Prior: Your initial belief about the probability of an event before considering new evidence.
  - Likelihood: How probable the new evidence is, assuming the event is true.
  - Evidence: The probability of observing the new evidence, taking into account all possible scenarios.
  - Posterior: The updated probability of the event occurring, given the new evidence.
"""

_CLOSING_NOTE = """\
Use this table to understand how new evidence has updated the probability of the event.
Keep in mind that Bayesian reasoning is an iterative process, and you can \
update your probabilities as new evidence becomes available.
"""


def format_percentage(value: float) -> str:
    """Format a fraction as a percentage with fixed decimals.

    NaN is not translated: it renders as ``nan%``.

    Examples:
        >>> format_percentage(0.66666)
        '66.67%'
        >>> format_percentage(float("nan"))
        'nan%'
    """
    return f"{value * PERCENT_SCALE:.{DISPLAY_DECIMALS}f}{PERCENT_SUFFIX}"


def render_intro() -> str:
    return _INTRO


def render_pipeline_diagram() -> str:
    return _PIPELINE_DIAGRAM


def render_instructions() -> str:
    return _INSTRUCTIONS


def render_help(topic: str) -> str:
    """Return the explanation shown before asking for *topic*.

    Raises:
        KeyError: if *topic* is not one of prior, likelihood or evidence
    """
    return _HELP[topic]


def render_table_legend() -> str:
    return _TABLE_LEGEND


def render_closing_note() -> str:
    return _CLOSING_NOTE


def _border() -> str:
    return f"+{'-' * (LABEL_COLUMN_WIDTH + 2)}+{'-' * (VALUE_COLUMN_WIDTH + 2)}+"


def _row(label: str, value: str) -> str:
    return f"| {label:<{LABEL_COLUMN_WIDTH}} | {value:<{VALUE_COLUMN_WIDTH}} |"


def render_table(result: CalculationResult) -> str:
    """Render the inputs and posterior as a four-row ASCII table."""
    rows = [
        ("Prior", result.prior),
        ("Likelihood", result.likelihood),
        ("Evidence", result.evidence),
        ("Posterior", result.posterior),
    ]

    lines = [_border(), _row("Probability", "Value"), _border()]
    lines.extend(_row(label, format_percentage(value)) for label, value in rows)
    lines.append(_border())
    return "\n".join(lines)


def render_summary(result: CalculationResult) -> str:
    """Render the closing sentence with the description and posterior."""
    return (
        "Based on the information provided, the probability for "
        f"'{result.description}' is {format_percentage(result.posterior)}"
    )


def write_report(result: CalculationResult, write: Writer) -> None:
    """Write the legend, results table, closing note and summary."""
    write(render_table_legend())
    write(render_table(result))
    write("")
    write(render_closing_note())
    write(render_summary(result))
