"""Conversion helpers between plain values, text and temporal objects.

Shortcuts for the common cases:

    >>> hours(7)
    HourOfDay(07)
    >>> at(date(2024, 1, 3), HourOfDay.of(7))
    datetime.datetime(2024, 1, 3, 7, 0)
    >>> to_formatted_string(time(7, 5))
    '07:05:00'

Text without an explicit pattern is formatted and parsed with the patterns
from load_config().
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from .config import load_config
from .exceptions import ParseError
from .subday import BoundedTemporal, HourOfDay, MinuteOfHour, SecondOfMinute
from .temporal.format import TemporalFormatter
from .temporal.queries import TemporalQuery
from .temporal.units import TemporalUnit

# =============================================================================
# Numbers to Values
# =============================================================================


def _to_int(value: int | str) -> int:
    # other types go to of() unchanged and are rejected there
    return int(value) if isinstance(value, str) else value


def hours(value: int | str) -> HourOfDay:
    """HourOfDay from an int or a numeric string such as "7".

    Raises:
        ValueError: If a string is not numeric
        TypeError: If the value is neither an int nor a string
        RangeError: If the value is not 0-23
    """
    return HourOfDay.of(_to_int(value))


def minutes(value: int | str) -> MinuteOfHour:
    """MinuteOfHour from an int or a numeric string."""
    return MinuteOfHour.of(_to_int(value))


def seconds(value: int | str) -> SecondOfMinute:
    """SecondOfMinute from an int or a numeric string."""
    return SecondOfMinute.of(_to_int(value))


def between(start: Any, end: Any, unit: TemporalUnit) -> int:
    """Amount of time between two temporal objects, in the given unit."""
    return start.until(end, unit)


def at(day: date, time_of_day: time | BoundedTemporal) -> datetime:
    """Combine a date with a time of day.

    A bounded value adjusts midnight of the day, so at(day, HourOfDay.of(7))
    is 07:00 on that day.
    """
    if isinstance(time_of_day, time):
        return datetime.combine(day, time_of_day)
    return time_of_day.adjust_into(datetime.combine(day, time.min))


# =============================================================================
# Formatting
# =============================================================================


def _default_formatter(value: Any) -> TemporalFormatter:
    config = load_config()
    if isinstance(value, datetime):
        return config.formatter("local_date_time")
    if isinstance(value, date):
        return config.formatter("local_date")
    if isinstance(value, time):
        return config.formatter("local_time")
    raise TypeError(f"No default pattern for {type(value).__name__}; pass a pattern")


def to_formatted_string(accessor: Any, pattern: str | TemporalFormatter | None = None) -> str:
    """Format a temporal object.

    Args:
        accessor: Temporal object or stdlib date, time or datetime
        pattern: Pattern, formatter, or None for the configured default of
            the stdlib type

    Raises:
        TypeError: If no pattern is given and the type has no default
        ValueError: If the pattern is invalid
    """
    if pattern is None:
        formatter = _default_formatter(accessor)
    elif isinstance(pattern, TemporalFormatter):
        formatter = pattern
    else:
        formatter = TemporalFormatter.of_pattern(pattern)
    return formatter.format(accessor)


def format_year(value: date) -> str:
    """Year of a date with the configured year pattern."""
    return load_config().formatter("year").format(value)


def format_year_month(value: date) -> str:
    """Year and month of a date with the configured year-month pattern."""
    return load_config().formatter("year_month").format(value)


def format_month_day(value: date) -> str:
    """Month and day of a date with the configured month-day pattern."""
    return load_config().formatter("month_day").format(value)


# =============================================================================
# Parsing
# =============================================================================


def _formatter(pattern: str | TemporalFormatter | None, name: str) -> TemporalFormatter:
    if pattern is None:
        return load_config().formatter(name)
    if isinstance(pattern, TemporalFormatter):
        return pattern
    return TemporalFormatter.of_pattern(pattern)


def parse_local_time(text: str, pattern: str | TemporalFormatter | None = None) -> time:
    """Parse a time of day.

    Raises:
        ParseError: If the text does not match or has no hour
    """
    result = _formatter(pattern, "local_time").parse(text, TemporalQuery.LOCAL_TIME)
    if result is None:
        raise ParseError(f"Text '{text}' could not be parsed: no time of day found", text, 0)
    return result


def parse_local_time_or_none(text: str | None, pattern: str | TemporalFormatter | None = None) -> time | None:
    """Like parse_local_time(), but None for missing or unparsable text."""
    if text is None:
        return None
    try:
        return parse_local_time(text, pattern)
    except ParseError:
        return None


def parse_local_date(text: str, pattern: str | TemporalFormatter | None = None) -> date:
    """Parse a date.

    Raises:
        ParseError: If the text does not match or lacks year, month or day
    """
    result = _formatter(pattern, "local_date").parse(text, TemporalQuery.LOCAL_DATE)
    if result is None:
        raise ParseError(f"Text '{text}' could not be parsed: no date found", text, 0)
    return result


def parse_local_date_or_none(text: str | None, pattern: str | TemporalFormatter | None = None) -> date | None:
    """Like parse_local_date(), but None for missing or unparsable text."""
    if text is None:
        return None
    try:
        return parse_local_date(text, pattern)
    except ParseError:
        return None


def parse_local_date_time(text: str, pattern: str | TemporalFormatter | None = None) -> datetime:
    """Parse a date and time of day.

    Raises:
        ParseError: If the text does not match or lacks a date or an hour
    """
    result = _formatter(pattern, "local_date_time").parse(text, TemporalQuery.LOCAL_DATE_TIME)
    if result is None:
        raise ParseError(f"Text '{text}' could not be parsed: no date-time found", text, 0)
    return result


def parse_local_date_time_or_none(
    text: str | None, pattern: str | TemporalFormatter | None = None
) -> datetime | None:
    """Like parse_local_date_time(), but None for missing or unparsable text."""
    if text is None:
        return None
    try:
        return parse_local_date_time(text, pattern)
    except ParseError:
        return None
