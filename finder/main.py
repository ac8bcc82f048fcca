"""
Resistor Finder - Main Entry Point

Asks for a desired resistance, then lists every single resistor and every
series / parallel pair from the value tables that lands within 2 % of it.

Run flow
--------
  1. banner
  2. input_reader.read_desired_value() → desired ohms
     (skipped when the value is given on the command line)
  3. reporter.report(desired) → result lines on stdout
  4. "Press enter to continue..." pause (skipped with --no-pause)

Log records go to stderr; stdout carries only the prompts and the results.

Run from the repo root:
    python finder/main.py [desired] [--no-pause] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys

import config
import reporter
from errors import InvalidInputError
from input_reader import parse_desired_value, read_desired_value

log = logging.getLogger(__name__)


def _desired_value_arg(text: str) -> float:
    """argparse ``type=`` hook: reuse the interactive validation rules."""
    try:
        return parse_desired_value(text)
    except InvalidInputError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Find E24 resistors, singly or in series/parallel pairs, "
                    "within 2% of a desired value.",
    )
    parser.add_argument(
        "desired", nargs="?", type=_desired_value_arg,
        help="desired resistance in ohms, e.g. 4700 or 4k7 (prompted if omitted)",
    )
    parser.add_argument(
        "--no-pause", action="store_true",
        help="exit without waiting for enter after the results",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log debug details to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

    print(config.BANNER)

    try:
        desired = args.desired
        if desired is None:
            desired = read_desired_value(sys.stdin, sys.stdout)
        log.debug("desired value: %g ohms", desired)

        print(config.RESULTS_HEADER)
        count = reporter.report(desired, sys.stdout)
        log.info("%d combination(s) within tolerance", count)

        if not args.no_pause:
            print(config.PAUSE_PROMPT)
            sys.stdin.readline()
    except EOFError as exc:
        log.warning("%s", exc)
        return 1
    except KeyboardInterrupt:
        log.warning("Interrupted")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
