"""
Resistor Finder - Exceptions
"""


class ResistorFinderError(Exception):
    """Base class for every error raised by the finder."""


class InvalidInputError(ResistorFinderError, ValueError):
    """The desired value is missing, unparseable, or not a positive number."""


class DomainError(ResistorFinderError, ValueError):
    """A resistance outside the positive reals reached a calculation."""


class NonPositiveValueError(InvalidInputError):
    """The desired value parsed as a finite number but is zero or negative."""
