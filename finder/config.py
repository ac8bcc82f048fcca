"""
Resistor Finder - Configuration
"""

import logging

# Console text
BANNER = "*** Calculator for 2 resistor pair ***"
PROMPT = "\nEnter desired value: "
INVALID_NUMBER_MSG = "\n**Error: please enter a valid number**"
NOT_POSITIVE_MSG = "\n**Error: please enter a value greater than zero**"
RESULTS_HEADER = "\n\nResults within 2% of value..."
PAUSE_PROMPT = "\nPress enter to continue..."

# Logging (records go to stderr so stdout only carries the result table)
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
