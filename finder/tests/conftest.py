"""
pytest configuration for the resistor finder tests.
- Adds finder/ to sys.path so the flat modules import as they do at runtime.
"""
import os
import sys

_tests_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(_tests_dir, ".."))  # finder/
