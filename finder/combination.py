"""
Resistor Finder - Series / Parallel Combination
"""

from __future__ import annotations

from dataclasses import dataclass

from errors import DomainError


@dataclass(frozen=True)
class ResistorPair:
    """Two resistors and their series and parallel equivalents (ohms)."""

    r1: float
    r2: float
    series: float
    parallel: float


def combine(r1: float, r2: float) -> ResistorPair:
    """Return the series and parallel equivalents of *r1* and *r2*.

    Raises:
        DomainError: if either resistance is not strictly positive.
    """
    if r1 <= 0 or r2 <= 0:
        raise DomainError(f"resistances must be positive, got {r1!r} and {r2!r}")

    total = r1 + r2
    return ResistorPair(
        r1=r1,
        r2=r2,
        series=total,
        parallel=(r1 * r2) / total,
    )
