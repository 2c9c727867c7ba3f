"""
chronoext: Bounded sub-day temporal values for Python.

This library provides hour-of-day, minute-of-hour and second-of-minute
values that take part in the same field, unit, query and adjustment
operations as full date-time objects, together with pattern based
formatting and parsing and conversion helpers for the stdlib datetime types.
"""

from __future__ import annotations

from .exceptions import (
    ArithmeticOverflowError,
    ChronoError,
    ChronologyMismatchError,
    ConversionError,
    InvalidStateError,
    ParseError,
    RangeError,
    UnsupportedFieldError,
    UnsupportedTemporalTypeError,
    UnsupportedUnitError,
)
from .subday import HourOfDay, MinuteOfHour, SecondOfMinute
from .temporal import ChronoField, ChronoUnit, Chronology, FixedClock, SystemClock, TemporalFormatter, TemporalQuery

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ArithmeticOverflowError",
    "ChronoError",
    "ChronoField",
    "ChronoUnit",
    "Chronology",
    "ChronologyMismatchError",
    "ConversionError",
    "FixedClock",
    "HourOfDay",
    "InvalidStateError",
    "MinuteOfHour",
    "ParseError",
    "RangeError",
    "SecondOfMinute",
    "SystemClock",
    "TemporalFormatter",
    "TemporalQuery",
    "UnsupportedFieldError",
    "UnsupportedTemporalTypeError",
    "UnsupportedUnitError",
]
