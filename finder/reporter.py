"""
Resistor Finder - Search and Report

Runs the single-resistor and two-resistor searches against a desired value and
prints one tab-separated line per match:

    Single:     <R1>                        <err>%
    Series:         <R1>    <R2>    <R1+R2> <err>%
    Parallel:   <R1>    <R2>    <R1||R2>    <err>%

Lines come out in enumeration order (base value, then decade, then the pair
inner loop); they are never sorted by error.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from combination import combine
from errors import DomainError
from matcher import Analysis, evaluate
from res_format import to_engineering_notation
from value_space import iter_pairs, scaled_values

log = logging.getLogger(__name__)

SINGLE = "single"
SERIES = "series"
PARALLEL = "parallel"


@dataclass(frozen=True)
class Match:
    """A single resistor or a combined pair that landed inside the window."""

    kind: str
    r1: float
    r2: float | None
    value: float
    analysis: Analysis


# ---------------------------------------------------------------------------
# Searches
# ---------------------------------------------------------------------------

def search_singles(desired: float) -> Iterator[Match]:
    """Yield a :class:`Match` for every scaled value within tolerance."""
    for r1 in scaled_values():
        analysis = evaluate(r1, desired)
        if analysis.is_match:
            yield Match(SINGLE, r1, None, r1, analysis)


def search_pairs(desired: float) -> Iterator[Match]:
    """Yield series and parallel matches for every unordered pair.

    The series and parallel values of a pair are judged independently, so a
    pair can produce zero, one or two matches (series first).
    """
    for r1, r2 in iter_pairs():
        pair = combine(r1, r2)

        series = evaluate(pair.series, desired)
        if series.is_match:
            yield Match(SERIES, r1, r2, pair.series, series)

        parallel = evaluate(pair.parallel, desired)
        if parallel.is_match:
            yield Match(PARALLEL, r1, r2, pair.parallel, parallel)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def format_match(match: Match) -> str:
    """Return the report line for *match* (without a trailing newline)."""
    error = f"{match.analysis.percent_error:3.1f}%"
    r1 = to_engineering_notation(match.r1)

    if match.kind == SINGLE:
        return f"Single:\t{r1}\t\t\t\t{error}"

    r2 = to_engineering_notation(match.r2)
    value = to_engineering_notation(match.value)
    if match.kind == SERIES:
        return f"Series:\t\t{r1}\t{r2}\t{value}\t{error}"
    if match.kind == PARALLEL:
        return f"Parallel:\t{r1}\t{r2}\t{value}\t{error}"

    raise DomainError(f"unknown match kind {match.kind!r}")


def report(desired: float, out: TextIO = sys.stdout) -> int:
    """Write every single and pair match for *desired* to *out*.

    Returns:
        Number of result lines written.
    """
    singles = 0
    for match in search_singles(desired):
        print(format_match(match), file=out)
        singles += 1

    pairs = 0
    for match in search_pairs(desired):
        print(format_match(match), file=out)
        pairs += 1

    log.debug(
        "desired=%g: %d single match(es), %d pair match(es)",
        desired, singles, pairs,
    )
    return singles + pairs
