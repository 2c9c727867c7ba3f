"""Bounded sub-day field values.

This module implements the generic bounded field shared by HourOfDay,
MinuteOfHour and SecondOfMinute. A bounded field value wraps one integer
restricted to the range of its natural field and implements the complete
Temporal capability set:

    - construction: of(), now(), from_temporal(), parse()
    - field access: is_supported_field(), range(), get(), get_long(), with_field()
    - arithmetic: plus(), minus(), until() in the natural unit and finer units
    - adjustment: adjust_into() sets the natural field on another temporal
    - comparison: total ordering and equality by value

Each kind is configured by a BoundedFieldKind descriptor: the natural field
and unit, the default parse pattern, and the FieldMapping table translating
between the stored value and every supported field.

Arithmetic is bounded, not modular: leaving the range raises RangeError
instead of wrapping around the clock face.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta, tzinfo
from functools import total_ordering
from typing import Any, ClassVar, NoReturn, Self

from ..exceptions import (
    ChronoError,
    ChronologyMismatchError,
    ConversionError,
    InvalidStateError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from ..temporal import access
from ..temporal.amount import add_amount, subtract_amount
from ..temporal.base import Temporal, TemporalAdjuster
from ..temporal.clock import Clock, SystemClock
from ..temporal.common import Chronology, ValueRange
from ..temporal.fields import ChronoField, TemporalField
from ..temporal.format import TemporalFormatter
from ..temporal.queries import Query, TemporalQuery
from ..temporal.units import ChronoUnit, TemporalUnit

# =============================================================================
# Kind Descriptors
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class FieldMapping:
    """Translation between a stored value and one supported field.

    Attributes:
        field: Field this mapping supports
        range: Valid values of the field for this kind
        get: Stored value -> field value
        set: (stored value, new field value) -> new stored value
    """

    field: ChronoField
    range: ValueRange
    get: Callable[[int], int]
    set: Callable[[int, int], int]


@dataclass(frozen=True, kw_only=True)
class BoundedFieldKind:
    """Configuration of one bounded field kind.

    Attributes:
        name: Kind name used in messages
        field: Natural field; its range bounds the stored value
        unit: Natural unit used by plus(), minus() and until()
        pattern: Default lenient parse pattern
        mappings: Supported fields (must include the natural field)
    """

    name: str
    field: ChronoField
    unit: ChronoUnit
    pattern: str
    mappings: tuple[FieldMapping, ...]

    _lookup: dict[ChronoField, FieldMapping] = field(init=False, repr=False, compare=False)
    _parser: TemporalFormatter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lookup = {mapping.field: mapping for mapping in self.mappings}
        if self.field not in lookup:
            raise ValueError(f"{self.name}: mappings must include natural field {self.field}")
        object.__setattr__(self, "_lookup", lookup)
        object.__setattr__(self, "_parser", TemporalFormatter.of_pattern(self.pattern, lenient=True))

    @property
    def range(self) -> ValueRange:
        """Range of the stored value."""
        return self._lookup[self.field].range

    @property
    def minimum(self) -> int:
        return self.range.minimum

    @property
    def maximum(self) -> int:
        return self.range.maximum

    @property
    def parser(self) -> TemporalFormatter:
        """Default lenient parser for this kind."""
        return self._parser

    def mapping(self, field: ChronoField) -> FieldMapping | None:
        """Mapping for a field, or None if the kind does not support it."""
        return self._lookup.get(field)

    def conversion_factor(self, unit: ChronoUnit) -> int | None:
        """Number of unit amounts per natural unit.

        Returns:
            1 for the natural unit, the ratio for finer time-based units,
            None for units that cannot be converted
        """
        if unit is self.unit:
            return 1
        if unit.is_time_based and unit.is_finer_than(self.unit):
            return self.unit.nanos // unit.nanos
        return None


def _check_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a field value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _truncating_divide(amount: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(amount) // divisor
    return quotient if amount >= 0 else -quotient


# =============================================================================
# Bounded Temporal
# =============================================================================


@total_ordering
class BoundedTemporal(Temporal):
    """Immutable sub-day value bounded by its kind's range.

    Subclasses only bind a BoundedFieldKind to KIND. Instances are created
    through of() and the other factories. Any other allocation, including a
    pickle stream that skips of(), raises InvalidStateError (a TypeError).
    """

    __slots__ = ("_value",)

    KIND: ClassVar[BoundedFieldKind]

    _value: int

    def __new__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        raise InvalidStateError(f"{cls.__name__} cannot be instantiated directly; use {cls.__name__}.of()")

    # ==========================================================================
    # Factories
    # ==========================================================================

    @classmethod
    def of(cls, value: int) -> Self:
        """Obtain an instance from its numeric value.

        Raises:
            RangeError: If the value is outside the kind's range
            TypeError: If the value is not an int
        """
        cls.KIND.field.check_valid_value(_check_int(value, "value"))
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    @classmethod
    def now(cls, clock: Clock | tzinfo | str | None = None) -> Self:
        """Obtain the current value from a clock.

        Args:
            clock: Clock to read, a zone (tzinfo or zone key) for the system
                clock in that zone, or None for the system clock in the
                system default zone
        """
        if not isinstance(clock, Clock):
            clock = SystemClock(clock)
        return cls.from_temporal(clock.now().time())

    @classmethod
    def from_temporal(cls, accessor: Any) -> Self:
        """Obtain an instance from a temporal object.

        Objects of another calendar system are converted through their time
        of day first.

        Raises:
            ConversionError: If the value cannot be obtained from the object
        """
        if isinstance(accessor, cls):
            return accessor
        try:
            if access.chronology_of(accessor) is not Chronology.ISO:
                local_time = access.local_time_of(accessor)
                return cls.of(access.get(local_time, cls.KIND.field))
            return cls.of(access.get(accessor, cls.KIND.field))
        except ChronoError as e:
            raise ConversionError(
                f"Unable to obtain {cls.__name__} from TemporalAccessor: {accessor!r} "
                f"of type {access.type_name(accessor)}"
            ) from e

    @classmethod
    def parse(cls, text: str, formatter: TemporalFormatter | None = None) -> Self:
        """Obtain an instance from text such as "07".

        Args:
            text: Text to parse
            formatter: Formatter to use (default: the kind's lenient two-digit pattern)

        Raises:
            ParseError: If the text cannot be parsed
        """
        if formatter is None:
            formatter = cls.KIND.parser
        return formatter.parse(text, cls.from_temporal)

    # ==========================================================================
    # Properties
    # ==========================================================================

    @property
    def value(self) -> int:
        return self._value

    @property
    def amounts(self) -> timedelta:
        """Duration of exactly value natural units."""
        return timedelta(microseconds=self._value * self.KIND.unit.nanos // 1_000)

    # ==========================================================================
    # Field Access
    # ==========================================================================

    def is_supported_field(self, field: TemporalField | None) -> bool:
        if isinstance(field, ChronoField):
            return self.KIND.mapping(field) is not None
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit | None) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit is self.KIND.unit
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if isinstance(field, ChronoField):
            return self._mapping(field).range
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            return self._mapping(field).get(self._value)
        return field.get_from(self)

    def with_field(self, field: TemporalField, new_value: int) -> Self:
        """Copy with a field set.

        Raises:
            RangeError: If new_value is invalid for the field or the result
                is outside the kind's range
            UnsupportedFieldError: If the field is not supported
        """
        if isinstance(field, ChronoField):
            mapping = self._mapping(field)
            mapping.range.check_valid_value(new_value, field)
            return self.of(mapping.set(self._value, new_value))
        return self._same_kind(field.adjust_into(self, new_value))

    def with_adjuster(self, adjuster: TemporalAdjuster) -> Self:
        """Copy adjusted by an adjuster, such as another instance of this kind."""
        return self._same_kind(adjuster.adjust_into(self))

    def _mapping(self, field: ChronoField) -> FieldMapping:
        mapping = self.KIND.mapping(field)
        if mapping is None:
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return mapping

    def _same_kind(self, result: Any) -> Self:
        if not isinstance(result, type(self)):
            raise TypeError(f"Expected {type(self).__name__}, got {type(result).__name__}")
        return result

    # ==========================================================================
    # Arithmetic
    # ==========================================================================

    def plus(self, amount: Any, unit: TemporalUnit | None = None) -> Self:
        """Copy with an amount added.

        Args:
            amount: timedelta or TemporalAmount when unit is None, else an int
            unit: Unit of the amount; finer units are truncated toward zero
                into whole natural units

        Raises:
            RangeError: If the result is outside the kind's range
            TypeError: If unit is given and amount is not an int
            UnsupportedUnitError: If the unit is not supported
        """
        if unit is None:
            return self._same_kind(add_amount(self, amount))
        if isinstance(unit, ChronoUnit):
            factor = self.KIND.conversion_factor(unit)
            if factor is None:
                raise UnsupportedUnitError(f"Unsupported unit: {unit}")
            return self._plus_natural(_truncating_divide(_check_int(amount, "amount"), factor))
        return self._same_kind(unit.add_to(self, amount))

    def minus(self, amount: Any, unit: TemporalUnit | None = None) -> Self:
        """Copy with an amount subtracted; see plus()."""
        if unit is None:
            return self._same_kind(subtract_amount(self, amount))
        if isinstance(unit, ChronoUnit):
            _check_int(amount, "amount")
        return self.plus(-amount, unit)

    def _plus_natural(self, amount: int) -> Self:
        if amount == 0:
            return self
        return self.of(self.KIND.field.check_valid_value(self._value + amount))

    def until(self, end_exclusive: Any, unit: TemporalUnit) -> int:
        """Amount of time until another value, as a plain signed difference.

        The difference does not wrap around: 23 until 1 in the natural unit
        is -22.

        Raises:
            ConversionError: If end_exclusive cannot be converted to this kind
            UnsupportedUnitError: If the unit is not supported
        """
        end = self.from_temporal(end_exclusive)
        if isinstance(unit, ChronoUnit):
            if unit is not self.KIND.unit:
                raise UnsupportedUnitError(f"Unsupported unit: {unit}")
            return end._value - self._value
        return unit.between(self, end)

    def __add__(self, amount: Any) -> Self:
        if not isinstance(amount, timedelta):
            return NotImplemented
        return self.plus(amount)

    def __sub__(self, amount: Any) -> Self:
        if not isinstance(amount, timedelta):
            return NotImplemented
        return self.minus(amount)

    # ==========================================================================
    # Queries and Adjustment
    # ==========================================================================

    def query(self, query: Query) -> Any:
        if query is TemporalQuery.CHRONOLOGY:
            return Chronology.ISO
        if query is TemporalQuery.PRECISION:
            return self.KIND.unit
        return super().query(query)

    def adjust_into(self, temporal: Any) -> Any:
        """Set the natural field of another temporal object to this value.

        Raises:
            ChronologyMismatchError: If the target is not an ISO temporal
        """
        if access.chronology_of(temporal) is not Chronology.ISO:
            raise ChronologyMismatchError("Adjustment only supported on ISO date-time")
        return access.with_field(temporal, self.KIND.field, self._value)

    def format(self, formatter: TemporalFormatter) -> str:
        return formatter.format(self)

    # ==========================================================================
    # Comparison
    # ==========================================================================

    def compare_to(self, other: Self) -> int:
        """Negative, zero or positive as this value is less, equal or greater.

        Raises:
            TypeError: If other is not of the same kind
        """
        return self._value - self._same_kind(other)._value

    def is_before(self, other: Self) -> bool:
        return self._value < self._same_kind(other)._value

    def is_after(self, other: Self) -> bool:
        return self._value > self._same_kind(other)._value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    # ==========================================================================
    # Immutability and Serialization
    # ==========================================================================

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"Cannot modify immutable {type(self).__name__} attribute '{name}'")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Cannot delete immutable {type(self).__name__} attribute '{name}'")

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> tuple[Callable[[int], Self], tuple[int]]:
        return self.of, (self._value,)

    def __setstate__(self, state: Any) -> NoReturn:
        raise InvalidStateError("Deserialization via serialization delegate")

    # ==========================================================================
    # Text
    # ==========================================================================

    def __str__(self) -> str:
        return f"{self._value:02d}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value:02d})"
