"""
Resistor Finder - Resistor Shorthand Formatting

Converts ohm values to the compact labels printed on schematics and parts
(8R2, 470R, 4k7, 47k, 2M2) and parses those labels back into ohms.

Exports:
    to_engineering_notation    – ohms → shorthand string
    parse_engineering_notation – shorthand or plain number → ohms
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from errors import DomainError, InvalidInputError

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

# Formatting bands, first match wins:
#   (upper limit, scale factor, decimal places, suffix, suffix replaces '.')
# The last band appends "M" to a 1-decimal number ("22.0M") where the band
# below it replaces the point ("2M2"); both are kept as-is.
_BANDS: tuple[tuple[float, Decimal, int, str, bool], ...] = (
    (1.0,          Decimal("1000"),     0, "m", False),
    (10.0,         Decimal(1),          1, "R", True),
    (1_000.0,      Decimal(1),          0, "R", False),
    (10_000.0,     Decimal("0.001"),    1, "k", True),
    (1_000_000.0,  Decimal("0.001"),    0, "k", False),
    (10_000_000.0, Decimal("0.000001"), 1, "M", True),
    (math.inf,     Decimal("0.000001"), 1, "M", False),
)

# Shorthand markers → multiplier.  "m" and "M" are case-sensitive.
_UNIT_MULTIPLIERS: dict[str, Decimal] = {
    "m": Decimal("0.001"),
    "R": Decimal(1),
    "r": Decimal(1),
    "k": Decimal(1_000),
    "K": Decimal(1_000),
    "M": Decimal(1_000_000),
}

# "4700", "-5", ".5", "4.7e3" - no underscores, no inf/nan
_PLAIN_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

# "4k7", "8R2", "470R", "4.7k", ".5M" – the marker either replaces the point
# or follows the number, never both.
_SHORTHAND_RE = re.compile(
    r"^(?P<whole>\d*)(?:\.(?P<frac>\d+))?(?P<unit>[mRrkKM])(?P<tail>\d*)$"
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _scale_and_round(value: float, scale: Decimal, places: int) -> str:
    """Scale *value* and round it half away from zero to *places* decimals.

    Works on the shortest decimal repr of the float so 0.25 rounds to 0.3 and
    4750 / 1000 rounds to 4.8, which binary float rounding would not.
    """
    scaled = Decimal(repr(value)) * scale
    quantum = Decimal(1).scaleb(-places)
    return str(scaled.quantize(quantum, rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_engineering_notation(value: float) -> str:
    """Return the resistor shorthand for *value* ohms.

    Examples:
        0.5 → '500m', 8.2 → '8R2', 470 → '470R', 4700 → '4k7',
        47000 → '47k', 2200000 → '2M2', 22000000 → '22.0M'

    Raises:
        DomainError: if *value* is not strictly positive or not finite.
    """
    if not math.isfinite(value) or value <= 0:
        raise DomainError(f"cannot format resistance {value!r}")

    for limit, scale, places, suffix, replaces_point in _BANDS:
        if value < limit:
            text = _scale_and_round(value, scale, places)
            if replaces_point:
                return text.replace(".", suffix)
            return text + suffix

    # Unreachable: the last band's limit is infinity.
    raise DomainError(f"cannot format resistance {value!r}")


def parse_engineering_notation(text: str) -> float:
    """Return the resistance in ohms described by *text*.

    Accepts plain numbers ('4700', '4.7e3') as well as shorthand labels with a
    single m/R/k/M marker ('4k7', '470R', '4.7k', '500m').

    Raises:
        InvalidInputError: if *text* is neither a number nor a shorthand label.
    """
    text = text.strip()
    if not text:
        raise InvalidInputError("empty value")

    if _PLAIN_NUMBER_RE.match(text):
        return float(text)

    match = _SHORTHAND_RE.match(text)
    if match is None:
        raise InvalidInputError(f"not a number: {text!r}")

    whole = match.group("whole")
    frac = match.group("frac")
    tail = match.group("tail")
    if frac is not None and tail:
        raise InvalidInputError(f"ambiguous decimal point in {text!r}")
    if not (whole or frac or tail):
        raise InvalidInputError(f"no digits in {text!r}")

    try:
        number = Decimal(f"{whole or '0'}.{frac or tail or '0'}")
    except InvalidOperation as exc:
        raise InvalidInputError(f"not a number: {text!r}") from exc

    return float(number * _UNIT_MULTIPLIERS[match.group("unit")])


# ---------------------------------------------------------------------------
# Self-test (run with: python res_format.py)
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cases = [
        (0.5,        "500m"),
        (8.2,        "8R2"),
        (470,        "470R"),
        (4700,       "4k7"),
        (47000,      "47k"),
        (2200000,    "2M2"),
        (22000000,   "22.0M"),
    ]

    all_pass = True
    for ohms, expected in cases:
        got = to_engineering_notation(ohms)
        status = "PASS" if got == expected else "FAIL"
        if status == "FAIL":
            all_pass = False
        print(f"{status}  {ohms:>12,}  got={got!r:<10}  expected={expected!r}")

    print()
    print("All tests passed." if all_pass else "SOME TESTS FAILED.")
