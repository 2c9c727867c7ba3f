"""chronoext exception classes."""

from __future__ import annotations


class ChronoError(Exception):
    """Base exception for all date-time calculation errors."""


class RangeError(ChronoError, ValueError):
    """Value outside the valid range of a field."""


class ArithmeticOverflowError(ChronoError, ArithmeticError):
    """Computed value does not fit the requested integer size."""


class UnsupportedTemporalTypeError(ChronoError):
    """Field or unit is not supported by the temporal object."""


class UnsupportedFieldError(UnsupportedTemporalTypeError):
    """Field is not supported by the temporal object."""


class UnsupportedUnitError(UnsupportedTemporalTypeError):
    """Unit is not supported by the temporal object."""


class ChronologyMismatchError(ChronoError):
    """Temporal object uses a calendar system other than ISO."""


class ConversionError(ChronoError):
    """Unable to derive a value from a temporal object."""


class ParseError(ChronoError, ValueError):
    """Text could not be parsed.

    Attributes:
        text: The text that was being parsed
        position: Index in the text where parsing failed
    """

    text: str
    position: int

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(message)
        self.text = text
        self.position = position


class InvalidStateError(ChronoError, TypeError):
    """Object was allocated or restored without going through validated construction."""
