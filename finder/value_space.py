"""
Resistor Finder - Candidate Value Space

Expands the base/multiplier tables into the scaled single-resistor values and
the unordered pairs built from them.

Exports:
    scaled_values – the 84 single-resistor values, base-outer / decade-inner
    iter_pairs    – lazy (r1, r2) pairs with repetition, r1 never after r2
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from decimal import Decimal

from resistor_constants import BASE_VALUES, MULTIPLIERS

SINGLE_COUNT: int = len(BASE_VALUES) * len(MULTIPLIERS)      # 84
PAIR_COUNT: int = SINGLE_COUNT * (SINGLE_COUNT + 1) // 2    # 3570


def scaled_values() -> Iterator[float]:
    """Yield every base value × multiplier, e.g. 1, 10, 100, …, 1M, 1.2, 12, …

    Products are taken in decimal so 4.7 × 1000 comes out as 4700.0 rather
    than 4700.000000000001.
    """
    for base in BASE_VALUES:
        for multiplier in MULTIPLIERS:
            yield float(Decimal(repr(base)) * Decimal(repr(multiplier)))


def iter_pairs() -> Iterator[tuple[float, float]]:
    """Yield each unordered pair of scaled values once, including (r, r).

    r1 is the outer loop and r2 starts from r1's own position, following the
    order of :func:`scaled_values`.
    """
    return itertools.combinations_with_replacement(tuple(scaled_values()), 2)
