"""
Tests for the interactive input loop and the command-line entry point.

stdin / stdout are replaced with io.StringIO; no terminal is required.
"""

import io
import os
import sys
import unittest
from unittest.mock import patch

import config
from errors import InvalidInputError, NonPositiveValueError
from input_reader import parse_desired_value, read_desired_value

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read(text):
    """Run read_desired_value() over *text*; return (value, prompt output)."""
    stdout = io.StringIO()
    value = read_desired_value(io.StringIO(text), stdout)
    return value, stdout.getvalue()


# ---------------------------------------------------------------------------
# parse_desired_value
# ---------------------------------------------------------------------------

class TestParseDesiredValue(unittest.TestCase):
    """parse_desired_value(): first token only, positive finite values."""

    def test_plain_number(self):
        self.assertEqual(parse_desired_value("100\n"), 100.0)

    def test_shorthand(self):
        self.assertEqual(parse_desired_value("4k7"), 4700.0)

    def test_rest_of_line_is_ignored(self):
        self.assertEqual(parse_desired_value("12 ohms please"), 12.0)

    def test_blank_line_raises(self):
        with self.assertRaises(InvalidInputError):
            parse_desired_value("   \n")

    def test_non_numeric_raises(self):
        with self.assertRaises(InvalidInputError):
            parse_desired_value("hello")

    def test_zero_and_negative_raise(self):
        for text in ("0", "-100", "-0.5"):
            with self.subTest(text=text):
                with self.assertRaises(NonPositiveValueError):
                    parse_desired_value(text)

    def test_non_finite_is_not_a_number(self):
        for text in ("inf", "nan", "1e999"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidInputError) as ctx:
                    parse_desired_value(text)
                self.assertNotIsInstance(ctx.exception, NonPositiveValueError)

    def test_underscore_literal_raises(self):
        with self.assertRaises(InvalidInputError):
            parse_desired_value("1_000")


# ---------------------------------------------------------------------------
# read_desired_value
# ---------------------------------------------------------------------------

class TestReadDesiredValue(unittest.TestCase):
    """read_desired_value(): prompt, re-prompt on bad input, EOF."""

    def test_valid_first_line(self):
        value, output = _read("470\n")
        self.assertEqual(value, 470.0)
        self.assertEqual(output, config.PROMPT)

    def test_reprompts_after_non_numeric_line(self):
        value, output = _read("abc def\n100\n")
        self.assertEqual(value, 100.0)
        self.assertEqual(output.count(config.PROMPT), 2)
        self.assertIn(config.INVALID_NUMBER_MSG, output)

    def test_reprompts_indefinitely(self):
        value, output = _read("x\ny\nz\n\n33\n")
        self.assertEqual(value, 33.0)
        self.assertEqual(output.count(config.PROMPT), 5)
        self.assertEqual(output.count(config.INVALID_NUMBER_MSG), 4)

    def test_reprompts_after_non_positive_value(self):
        value, output = _read("-5\n0\n4k7\n")
        self.assertEqual(value, 4700.0)
        self.assertEqual(output.count(config.NOT_POSITIVE_MSG), 2)
        self.assertNotIn(config.INVALID_NUMBER_MSG, output)

    def test_infinite_value_reported_as_invalid_number(self):
        value, output = _read("inf\n1e999\n47\n")
        self.assertEqual(value, 47.0)
        self.assertEqual(output.count(config.INVALID_NUMBER_MSG), 2)
        self.assertNotIn(config.NOT_POSITIVE_MSG, output)

    def test_last_line_without_newline(self):
        value, _ = _read("bad\n82")
        self.assertEqual(value, 82.0)

    def test_empty_input_raises_eof(self):
        with self.assertRaises(EOFError):
            _read("")

    def test_eof_after_bad_lines_raises(self):
        with self.assertRaises(EOFError):
            _read("abc\n")


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

class TestMain(unittest.TestCase):
    """main(): banner → input → results → pause, and exit codes."""

    def _run(self, argv, stdin_text=""):
        import main
        with patch("sys.stdin", io.StringIO(stdin_text)), \
             patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main.main(argv)
        return code, out.getvalue()

    def test_interactive_run(self):
        code, output = self._run([], "100\n\n")
        self.assertEqual(code, 0)
        lines = output.splitlines()
        self.assertEqual(lines[0], config.BANNER)
        self.assertIn(config.PROMPT, output)
        self.assertIn(config.RESULTS_HEADER, output)
        self.assertIn("Single:\t100R\t\t\t\t0.0%", lines)
        self.assertTrue(output.endswith(config.PAUSE_PROMPT + "\n"))

    def test_sections_in_order(self):
        _, output = self._run([], "100\n\n")
        banner = output.index(config.BANNER)
        prompt = output.index(config.PROMPT)
        header = output.index(config.RESULTS_HEADER)
        first_result = output.index("Single:")
        pause = output.index(config.PAUSE_PROMPT)
        self.assertLess(banner, prompt)
        self.assertLess(prompt, header)
        self.assertLess(header, first_result)
        self.assertLess(first_result, pause)

    def test_value_on_command_line_skips_prompt(self):
        code, output = self._run(["4k7", "--no-pause"])
        self.assertEqual(code, 0)
        self.assertNotIn(config.PROMPT, output)
        self.assertNotIn(config.PAUSE_PROMPT, output)
        self.assertIn("Single:\t4k7\t\t\t\t0.0%", output.splitlines())

    def test_pause_tolerates_closed_stdin(self):
        code, output = self._run(["100"], "")
        self.assertEqual(code, 0)
        self.assertIn(config.PAUSE_PROMPT, output)

    def test_closed_stdin_before_value_exits_nonzero(self):
        code, output = self._run([], "")
        self.assertEqual(code, 1)
        self.assertNotIn(config.RESULTS_HEADER, output)

    def test_invalid_command_line_value_is_usage_error(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                self._run(["abc"])
        self.assertEqual(ctx.exception.code, 2)

    def test_repeat_runs_are_identical(self):
        _, first = self._run(["220", "--no-pause"])
        _, second = self._run(["220", "--no-pause"])
        self.assertEqual(first, second)


# ---------------------------------------------------------------------------
# Packaging
# ---------------------------------------------------------------------------

class TestPackaging(unittest.TestCase):
    """pyproject.toml: the flat modules are run in place, never installed."""

    @unittest.skipIf(sys.version_info < (3, 11), "tomllib needs Python 3.11")
    def test_flat_modules_are_not_installed(self):
        import tomllib
        path = os.path.join(os.path.dirname(__file__), "..", "..", "pyproject.toml")
        with open(path, "rb") as fh:
            pyproject = tomllib.load(fh)
        setuptools_cfg = pyproject["tool"]["setuptools"]
        self.assertEqual(setuptools_cfg["py-modules"], [])
        self.assertEqual(setuptools_cfg["packages"], [])
        self.assertNotIn("scripts", pyproject["project"])


if __name__ == "__main__":
    unittest.main()
