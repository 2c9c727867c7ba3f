"""Pattern based formatting and parsing of temporal objects.

Patterns use the familiar date-time pattern letters:

    Letter  Field                       Examples
    ------  --------------------------  ---------
    H       hour-of-day (0-23)          7; 07
    k       clock-hour-of-day (1-24)    24
    K       hour-of-am-pm (0-11)        0
    h       clock-hour-of-am-pm (1-12)  12
    m       minute-of-hour              5; 05
    s       second-of-minute            9; 09
    S       fraction-of-second          978
    a       am-pm-of-day                PM
    y       year                        2024; 24
    M       month-of-year               1; 01
    d       day-of-month                3; 03

Text between single quotes is literal ('' is a single quote); any other
character that is not a letter is literal as well.

A strict formatter requires every number to have the width given by the
pattern. A lenient formatter also accepts non-padded numbers and
case-insensitive AM/PM markers. Parsed values are always range checked.

Examples:
    >>> TemporalFormatter.of_pattern("HH:mm").format(time(7, 5))
    '07:05'
    >>> TemporalFormatter.of_pattern("HH", lenient=True).parse("7").get(ChronoField.HOUR_OF_DAY)
    7
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time
from functools import lru_cache
from typing import Any

from ..exceptions import ChronoError, ParseError, RangeError, UnsupportedFieldError
from . import access
from .base import TemporalAccessor
from .common import Chronology
from .fields import ChronoField, TemporalField
from .queries import Query, TemporalQuery

logger = logging.getLogger(__name__)

# =============================================================================
# Pattern Constants
# =============================================================================


MAX_NUMBER_WIDTH = 19  # Widest number accepted for a field
MAX_FRACTION_WIDTH = 9  # Nanosecond precision
REDUCED_YEAR_BASE = 2000  # Base year for two-digit years

_RESERVED_CHARACTERS = frozenset("[]{}#")

_NUMBER_LETTERS: dict[str, ChronoField] = {
    "H": ChronoField.HOUR_OF_DAY,
    "k": ChronoField.CLOCK_HOUR_OF_DAY,
    "K": ChronoField.HOUR_OF_AMPM,
    "h": ChronoField.CLOCK_HOUR_OF_AMPM,
    "m": ChronoField.MINUTE_OF_HOUR,
    "s": ChronoField.SECOND_OF_MINUTE,
    "M": ChronoField.MONTH_OF_YEAR,
    "d": ChronoField.DAY_OF_MONTH,
}

_AMPM_TEXT = ("AM", "PM")

# =============================================================================
# Pattern Elements
# =============================================================================


class _Element(ABC):
    """One printer/parser step of a compiled pattern."""

    numeric: bool = False

    @abstractmethod
    def format(self, accessor: Any) -> str: ...

    @abstractmethod
    def parse(self, text: str, position: int, values: dict[ChronoField, int], context: _ParseContext) -> int:
        """Parse at position, store field values, return the new position."""


@dataclass(frozen=True, kw_only=True)
class _ParseContext:
    lenient: bool
    adjacent_numeric: bool  # Next element is numeric and needs its digits


def _store(values: dict[ChronoField, int], field: ChronoField, value: int, text: str, position: int) -> None:
    previous = values.get(field)
    if previous is not None and previous != value:
        raise ParseError(
            f"Text '{text}' could not be parsed: conflict found: {field} {previous} differs from {field} {value}",
            text,
            position,
        )
    values[field] = value


def _no_match(text: str, position: int) -> ParseError:
    return ParseError(f"Text '{text}' could not be parsed at index {position}", text, position)


@dataclass(frozen=True)
class _Literal(_Element):
    text: str

    def format(self, accessor: Any) -> str:
        return self.text

    def parse(self, text: str, position: int, values: dict[ChronoField, int], context: _ParseContext) -> int:
        if not text.startswith(self.text, position):
            raise _no_match(text, position)
        return position + len(self.text)


@dataclass(frozen=True)
class _Number(_Element):
    field: ChronoField
    width: int  # Pad width when formatting, exact width when parsing strictly
    max_width: int  # Widest number accepted when the width is not fixed
    reduced: bool = False  # Two-digit year relative to REDUCED_YEAR_BASE

    numeric = True

    def format(self, accessor: Any) -> str:
        value = access.get_long(accessor, self.field)
        if self.reduced:
            return f"{value % 100:02d}"
        sign = "-" if value < 0 else ""
        return sign + str(abs(value)).zfill(self.width)

    def parse(self, text: str, position: int, values: dict[ChronoField, int], context: _ParseContext) -> int:
        if context.adjacent_numeric or (not context.lenient and self.width == self.max_width):
            minimum, maximum = self.width, self.width
        elif context.lenient:
            minimum, maximum = 1, self.max_width
        else:
            minimum, maximum = self.width, self.max_width
        match = re.compile(rf"[0-9]{{{minimum},{maximum}}}").match(text, position)
        if match is None:
            raise _no_match(text, position)
        value = int(match.group())
        if self.reduced:
            value += REDUCED_YEAR_BASE
        _store(values, self.field, value, text, position)
        return match.end()


@dataclass(frozen=True)
class _Fraction(_Element):
    width: int

    numeric = True

    def format(self, accessor: Any) -> str:
        nanos = access.get_long(accessor, ChronoField.NANO_OF_SECOND)
        return f"{nanos:09d}"[: self.width]

    def parse(self, text: str, position: int, values: dict[ChronoField, int], context: _ParseContext) -> int:
        flexible = context.lenient and not context.adjacent_numeric
        minimum, maximum = (1, MAX_FRACTION_WIDTH) if flexible else (self.width, self.width)
        match = re.compile(rf"[0-9]{{{minimum},{maximum}}}").match(text, position)
        if match is None:
            raise _no_match(text, position)
        _store(values, ChronoField.NANO_OF_SECOND, int(match.group().ljust(MAX_FRACTION_WIDTH, "0")), text, position)
        return match.end()


@dataclass(frozen=True)
class _AmPm(_Element):
    def format(self, accessor: Any) -> str:
        return _AMPM_TEXT[access.get_long(accessor, ChronoField.AMPM_OF_DAY)]

    def parse(self, text: str, position: int, values: dict[ChronoField, int], context: _ParseContext) -> int:
        candidate = text[position : position + 2]
        if context.lenient:
            candidate = candidate.upper()
        if candidate not in _AMPM_TEXT:
            raise _no_match(text, position)
        _store(values, ChronoField.AMPM_OF_DAY, _AMPM_TEXT.index(candidate), text, position)
        return position + 2


# =============================================================================
# Pattern Compilation
# =============================================================================


def _letter_element(letter: str, count: int) -> _Element:
    if letter in _NUMBER_LETTERS:
        if count > 2:
            raise ValueError(f"Too many pattern letters: {letter * count}")
        return _Number(_NUMBER_LETTERS[letter], count, 2 if count == 2 else MAX_NUMBER_WIDTH)
    if letter == "y":
        if count == 2:
            return _Number(ChronoField.YEAR, 2, 2, reduced=True)
        return _Number(ChronoField.YEAR, count, MAX_NUMBER_WIDTH)
    if letter == "S":
        if count > MAX_FRACTION_WIDTH:
            raise ValueError(f"Too many pattern letters: {letter * count}")
        return _Fraction(count)
    if letter == "a":
        if count > 1:
            raise ValueError(f"Too many pattern letters: {letter * count}")
        return _AmPm()
    raise ValueError(f"Unknown pattern letter: {letter}")


@lru_cache(maxsize=128)
def _compile(pattern: str) -> tuple[_Element, ...]:
    """Compile a pattern into its elements.

    Raises:
        ValueError: If the pattern is invalid
    """
    elements: list[_Element] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            elements.append(_Literal("".join(literal)))
            literal.clear()

    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            end = index + 1
            while True:
                end = pattern.find("'", end)
                if end == -1:
                    raise ValueError(f"Pattern ends with an incomplete string literal: {pattern}")
                if pattern.startswith("''", end):
                    end += 2
                    continue
                break
            quoted = pattern[index + 1 : end]
            literal.append("'" if quoted == "" else quoted.replace("''", "'"))
            index = end + 1
        elif char.isascii() and char.isalpha():
            count = 1
            while index + count < len(pattern) and pattern[index + count] == char:
                count += 1
            flush()
            elements.append(_letter_element(char, count))
            index += count
        elif char in _RESERVED_CHARACTERS:
            raise ValueError(f"Pattern includes reserved character: '{char}'")
        else:
            literal.append(char)
            index += 1
    flush()

    logger.debug("Compiled pattern %r into %d elements", pattern, len(elements))
    return tuple(elements)


# =============================================================================
# Parse Result
# =============================================================================


class ParsedFields(TemporalAccessor):
    """Field values produced by parsing, resolved and range checked.

    Clock-hour and AM/PM fields are resolved into HOUR_OF_DAY; year, month
    and day are validated as a whole date when all three are present.
    """

    __slots__ = ("_values",)

    _values: dict[ChronoField, int]

    def __init__(self, values: dict[ChronoField, int]) -> None:
        """Initialize and resolve parsed values.

        Raises:
            RangeError: If a value is outside its field's range
            ChronoError: If resolved values conflict
        """
        self._values = dict(values)
        for field, value in values.items():
            field.check_valid_value(value)
        self._resolve()

    def _merge(self, field: ChronoField, value: int) -> None:
        previous = self._values.get(field)
        if previous is not None and previous != value:
            raise ChronoError(f"Conflict found: {field} {previous} differs from {field} {value}")
        self._values[field] = value

    def _resolve(self) -> None:
        values = self._values
        if ChronoField.CLOCK_HOUR_OF_DAY in values:
            clock_hour = values[ChronoField.CLOCK_HOUR_OF_DAY]
            self._merge(ChronoField.HOUR_OF_DAY, 0 if clock_hour == 24 else clock_hour)
        if ChronoField.CLOCK_HOUR_OF_AMPM in values:
            clock_hour = values[ChronoField.CLOCK_HOUR_OF_AMPM]
            self._merge(ChronoField.HOUR_OF_AMPM, 0 if clock_hour == 12 else clock_hour)
        if ChronoField.AMPM_OF_DAY in values and ChronoField.HOUR_OF_AMPM in values:
            hour = values[ChronoField.AMPM_OF_DAY] * 12 + values[ChronoField.HOUR_OF_AMPM]
            self._merge(ChronoField.HOUR_OF_DAY, hour)
        if ChronoField.AMPM_OF_DAY in values and ChronoField.HOUR_OF_DAY in values:
            self._merge(ChronoField.AMPM_OF_DAY, values[ChronoField.HOUR_OF_DAY] // 12)
        if all(field in values for field in (ChronoField.YEAR, ChronoField.MONTH_OF_YEAR, ChronoField.DAY_OF_MONTH)):
            try:
                date(values[ChronoField.YEAR], values[ChronoField.MONTH_OF_YEAR], values[ChronoField.DAY_OF_MONTH])
            except ValueError as e:
                raise RangeError(f"Invalid date: {e}") from e

    def is_supported_field(self, field: TemporalField | None) -> bool:
        return field in self._values

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField) and field in self._values:
            return self._values[field]
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def query(self, query: Query) -> Any:
        values = self._values
        if query is TemporalQuery.CHRONOLOGY:
            return Chronology.ISO
        if query is TemporalQuery.PRECISION:
            if not values:
                return None
            return min((field.base_unit for field in values), key=lambda unit: unit.nanos)
        if query is TemporalQuery.LOCAL_TIME:
            if ChronoField.HOUR_OF_DAY not in values:
                return None
            return time(
                values[ChronoField.HOUR_OF_DAY],
                values.get(ChronoField.MINUTE_OF_HOUR, 0),
                values.get(ChronoField.SECOND_OF_MINUTE, 0),
                values.get(ChronoField.NANO_OF_SECOND, 0) // 1_000,
            )
        if query is TemporalQuery.LOCAL_DATE:
            try:
                return date(
                    values[ChronoField.YEAR], values[ChronoField.MONTH_OF_YEAR], values[ChronoField.DAY_OF_MONTH]
                )
            except KeyError:
                return None
        if query is TemporalQuery.LOCAL_DATE_TIME:
            local_date = self.query(TemporalQuery.LOCAL_DATE)
            local_time = self.query(TemporalQuery.LOCAL_TIME)
            if local_date is None or local_time is None:
                return None
            return datetime.combine(local_date, local_time)
        return super().query(query)

    def __repr__(self) -> str:
        fields = ", ".join(f"{field}={value}" for field, value in self._values.items())
        return f"{{{fields}}},ISO"


# =============================================================================
# Formatter
# =============================================================================


class TemporalFormatter:
    """Formatter and parser for a date-time pattern.

    Formatters are immutable and safe to share.
    """

    __slots__ = ("_pattern", "_elements", "_lenient")

    _pattern: str
    _elements: tuple[_Element, ...]
    _lenient: bool

    def __init__(self, pattern: str, lenient: bool = False) -> None:
        """Initialize formatter.

        Args:
            pattern: Date-time pattern, such as "HH:mm:ss"
            lenient: Accept non-padded numbers and case-insensitive AM/PM

        Raises:
            ValueError: If the pattern is invalid
        """
        self._pattern = pattern
        self._elements = _compile(pattern)
        self._lenient = lenient

    @classmethod
    def of_pattern(cls, pattern: str, lenient: bool = False) -> TemporalFormatter:
        """Create a formatter for a pattern."""
        return cls(pattern, lenient)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def is_lenient(self) -> bool:
        return self._lenient

    def with_lenient(self, lenient: bool = True) -> TemporalFormatter:
        """Copy of this formatter with leniency changed."""
        if lenient == self._lenient:
            return self
        return TemporalFormatter(self._pattern, lenient)

    def format(self, accessor: Any) -> str:
        """Format a temporal object.

        Raises:
            UnsupportedFieldError: If the object lacks a field used by the pattern
        """
        return "".join(element.format(accessor) for element in self._elements)

    def parse(self, text: str, query: Query | None = None) -> Any:
        """Parse text, optionally answering a query against the result.

        Args:
            text: Text to parse
            query: Query (such as HourOfDay.from_temporal) applied to the
                parsed fields; None returns the ParsedFields themselves

        Raises:
            ParseError: If the text does not match the pattern, or the parsed
                fields are invalid or cannot answer the query
        """
        values: dict[ChronoField, int] = {}
        position = 0
        for index, element in enumerate(self._elements):
            following = self._elements[index + 1] if index + 1 < len(self._elements) else None
            context = _ParseContext(
                lenient=self._lenient,
                adjacent_numeric=element.numeric and following is not None and following.numeric,
            )
            position = element.parse(text, position, values, context)

        if position != len(text):
            raise ParseError(
                f"Text '{text}' could not be parsed, unparsed text found at index {position}", text, position
            )

        try:
            parsed = ParsedFields(values)
            return parsed if query is None else parsed.query(query)
        except ParseError:
            raise
        except ChronoError as e:
            raise ParseError(f"Text '{text}' could not be parsed: {e}", text, 0) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemporalFormatter):
            return NotImplemented
        return self._pattern == other._pattern and self._lenient == other._lenient

    def __hash__(self) -> int:
        return hash((self._pattern, self._lenient))

    def __repr__(self) -> str:
        return f"TemporalFormatter({self._pattern!r}, lenient={self._lenient})"
