"""
Resistor Finder - Desired Value Input

Prompts until the user types a usable resistance.  Only the first token of
each line is considered; anything after it is discarded.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import TextIO

import config
from errors import InvalidInputError, NonPositiveValueError
from res_format import parse_engineering_notation

log = logging.getLogger(__name__)


def parse_desired_value(text: str) -> float:
    """Return the positive resistance in *text* ('4700', '4k7', '470R', …).

    Raises:
        InvalidInputError: if *text* is not a finite number.
        NonPositiveValueError: if the number is zero or negative.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidInputError("no value entered")

    value = parse_engineering_notation(tokens[0])
    if not math.isfinite(value):
        raise InvalidInputError(f"not a finite number: {tokens[0]!r}")
    if value <= 0:
        raise NonPositiveValueError(f"value must be greater than zero, got {value!r}")
    return value


def read_desired_value(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> float:
    """Prompt on *stdout* and read lines from *stdin* until one is valid.

    Raises:
        EOFError: if *stdin* is exhausted before a valid value is read.
    """
    while True:
        stdout.write(config.PROMPT)
        stdout.flush()

        line = stdin.readline()
        if not line:
            raise EOFError("input closed before a desired value was entered")

        try:
            return parse_desired_value(line)
        except NonPositiveValueError as exc:
            log.debug("rejected input %r: %s", line.rstrip("\n"), exc)
            print(config.NOT_POSITIVE_MSG, file=stdout)
        except InvalidInputError as exc:
            log.debug("rejected input %r: %s", line.rstrip("\n"), exc)
            print(config.INVALID_NUMBER_MSG, file=stdout)
