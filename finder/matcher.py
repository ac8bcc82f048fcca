"""
Resistor Finder - Tolerance Matching

Scores a candidate resistance against the desired value.  A candidate matches
when it falls strictly inside the ±2 % window; the reported error is the
unsigned distance of its percentage from 100 %.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from errors import DomainError, InvalidInputError
from resistor_constants import LOWER_FACTOR, UPPER_FACTOR


@dataclass(frozen=True)
class Analysis:
    """Outcome of comparing one candidate value against the desired value."""

    candidate: float
    desired: float
    is_match: bool
    percent_error: float


def evaluate(candidate: float, desired: float) -> Analysis:
    """Compare *candidate* with *desired* and return the :class:`Analysis`.

    The window bounds are exclusive: ``evaluate(98.0, 100.0)`` is not a match.
    An exact hit (100 %) reports an error of 0 through the ``100 - pct`` arm.

    Raises:
        InvalidInputError: if *desired* is not a positive finite number.
        DomainError: if *candidate* is not a positive finite number.
    """
    if not math.isfinite(desired) or desired <= 0:
        raise InvalidInputError(f"desired value must be positive, got {desired!r}")
    if not math.isfinite(candidate) or candidate <= 0:
        raise DomainError(f"candidate value must be positive, got {candidate!r}")

    lower = desired * LOWER_FACTOR
    upper = desired * UPPER_FACTOR
    percentage = (100 * candidate) / desired

    if percentage > 100:
        percent_error = percentage - 100
    else:
        percent_error = 100 - percentage

    return Analysis(
        candidate=candidate,
        desired=desired,
        is_match=lower < candidate < upper,
        percent_error=percent_error,
    )
