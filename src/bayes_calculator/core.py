"""Core probability parsing and Bayes' rule evaluation."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from bayes_calculator.config import (
    MAX_PERCENT,
    MIN_PERCENT,
    PERCENT_SCALE,
    PERCENT_SUFFIX,
)

logger = logging.getLogger(__name__)

# ASCII decimal with optional sign and exponent: "50", "-1", ".5", "1e1"
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class ValidationError(ValueError):
    """Raised when text cannot be read as a percentage in [0, 100]."""


@dataclass(frozen=True)
class CalculationResult:
    """Inputs of one calculation together with the derived posterior."""

    description: str
    prior: float
    likelihood: float
    evidence: float
    posterior: float

    @property
    def is_defined(self) -> bool:
        """False when the posterior is undefined (zero evidence)."""
        return not math.isnan(self.posterior)


def require_percentage(text: str) -> float:
    """Parse *text* as a percentage and return it as a fraction.

    Rules:
    - surrounding whitespace is ignored
    - a single trailing ``%`` is optional
    - the number must lie in the closed range [0, 100]

    Raises:
        ValidationError: if the text is not a number or is out of range

    Examples:
        >>> require_percentage("50")
        0.5
        >>> require_percentage(" 25.5% ")
        0.255
    """
    raw = text.strip()
    if raw.endswith(PERCENT_SUFFIX):
        raw = raw[: -len(PERCENT_SUFFIX)]

    # float() alone would also take "5_0", non-ASCII digits, "nan" and "inf"
    if _DECIMAL_RE.fullmatch(raw) is None:
        raise ValidationError(f"{text.strip()!r} is not a number")

    value = float(raw)
    if not MIN_PERCENT <= value <= MAX_PERCENT:
        raise ValidationError(
            f"{value:g} is outside the range {MIN_PERCENT:g}-{MAX_PERCENT:g}"
        )

    return value / PERCENT_SCALE


def parse_percentage(text: str) -> float | None:
    """Parse *text* as a percentage fraction, or return None if invalid.

    Public non-raising form of :func:`require_percentage`, for callers that
    only need to know whether the text is acceptable. The prompt loop uses
    the raising form so it can log why an answer was rejected.
    """
    try:
        return require_percentage(text)
    except ValidationError:
        return None


def compute_posterior(prior: float, likelihood: float, evidence: float) -> float:
    """Apply Bayes' rule: ``prior * likelihood / evidence``.

    Args:
        prior: P(H), the belief before seeing the evidence
        likelihood: P(E | H)
        evidence: P(E), probability of the evidence over all hypotheses

    Returns:
        The posterior P(H | E). When *evidence* is zero the posterior is
        undefined and ``math.nan`` is returned instead of raising.

    Inputs are not range checked; values outside [0, 1] produce whatever
    the formula produces.

    Examples:
        >>> round(compute_posterior(0.5, 0.8, 0.6), 4)
        0.6667
        >>> compute_posterior(0.5, 0.7, 0.0)
        nan
    """
    if evidence == 0.0:
        return math.nan
    return (prior * likelihood) / evidence


def evaluate(
    description: str,
    prior: float,
    likelihood: float,
    evidence: float,
) -> CalculationResult:
    """Compute the posterior and bundle it with its inputs."""
    posterior = compute_posterior(prior, likelihood, evidence)

    if math.isnan(posterior):
        logger.warning("Evidence is zero; posterior for %r is undefined", description)
    else:
        logger.info(
            "Posterior for %r: prior=%s likelihood=%s evidence=%s -> %s",
            description,
            prior,
            likelihood,
            evidence,
            posterior,
        )

    return CalculationResult(
        description=description,
        prior=prior,
        likelihood=likelihood,
        evidence=evidence,
        posterior=posterior,
    )
