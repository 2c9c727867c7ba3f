"""Fields of date-time.

Classes:
    - TemporalField: Protocol every field implements (custom fields included)
    - ChronoField: Standard set of fields, from nano-of-second to year

A field is a quantity read from or written to a temporal object, such as
hour-of-day. Each ChronoField knows its valid range and the units it is
measured in; whether a temporal object supports it is decided by the object.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple, Protocol, runtime_checkable

from .common import ValueRange
from .units import ChronoUnit

if TYPE_CHECKING:
    from .base import Temporal, TemporalAccessor


@runtime_checkable
class TemporalField(Protocol):
    """A field of date-time, such as month-of-year or minute-of-hour."""

    def is_supported_by(self, accessor: TemporalAccessor) -> bool: ...

    def range_refined_by(self, accessor: TemporalAccessor) -> ValueRange: ...

    def get_from(self, accessor: TemporalAccessor) -> int: ...

    def adjust_into(self, temporal: Temporal, new_value: int) -> Any: ...


class _FieldDescriptor(NamedTuple):
    display_name: str  # Name used in messages
    base_unit: ChronoUnit  # Unit the field is measured in
    range_unit: ChronoUnit  # Unit the field is bound by
    range: ValueRange  # Valid values


class ChronoField(Enum):
    """Standard set of date-time fields.

    Examples:
        >>> ChronoField.HOUR_OF_DAY.range()
        ValueRange(minimum=0, maximum=23)
        >>> ChronoField.CLOCK_HOUR_OF_AMPM.check_valid_value(12)
        12
    """

    # ==========================================================================
    # Time fields
    # ==========================================================================
    NANO_OF_SECOND = _FieldDescriptor(
        "NanoOfSecond", ChronoUnit.NANOS, ChronoUnit.SECONDS, ValueRange(0, 999_999_999)
    )
    MICRO_OF_SECOND = _FieldDescriptor(
        "MicroOfSecond", ChronoUnit.MICROS, ChronoUnit.SECONDS, ValueRange(0, 999_999)
    )
    MILLI_OF_SECOND = _FieldDescriptor("MilliOfSecond", ChronoUnit.MILLIS, ChronoUnit.SECONDS, ValueRange(0, 999))
    SECOND_OF_MINUTE = _FieldDescriptor("SecondOfMinute", ChronoUnit.SECONDS, ChronoUnit.MINUTES, ValueRange(0, 59))
    MINUTE_OF_HOUR = _FieldDescriptor("MinuteOfHour", ChronoUnit.MINUTES, ChronoUnit.HOURS, ValueRange(0, 59))
    HOUR_OF_AMPM = _FieldDescriptor("HourOfAmPm", ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange(0, 11))
    CLOCK_HOUR_OF_AMPM = _FieldDescriptor(
        "ClockHourOfAmPm", ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange(1, 12)
    )
    HOUR_OF_DAY = _FieldDescriptor("HourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange(0, 23))
    CLOCK_HOUR_OF_DAY = _FieldDescriptor("ClockHourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange(1, 24))
    AMPM_OF_DAY = _FieldDescriptor("AmPmOfDay", ChronoUnit.HALF_DAYS, ChronoUnit.DAYS, ValueRange(0, 1))

    # ==========================================================================
    # Date fields
    # ==========================================================================
    DAY_OF_WEEK = _FieldDescriptor("DayOfWeek", ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange(1, 7))
    DAY_OF_MONTH = _FieldDescriptor("DayOfMonth", ChronoUnit.DAYS, ChronoUnit.MONTHS, ValueRange(1, 31))
    MONTH_OF_YEAR = _FieldDescriptor("MonthOfYear", ChronoUnit.MONTHS, ChronoUnit.YEARS, ValueRange(1, 12))
    YEAR = _FieldDescriptor("Year", ChronoUnit.YEARS, ChronoUnit.YEARS, ValueRange(-999_999_999, 999_999_999))

    def __str__(self) -> str:
        return self.value.display_name

    @property
    def base_unit(self) -> ChronoUnit:
        return self.value.base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self.value.range_unit

    @property
    def is_time_based(self) -> bool:
        return self.value.base_unit.is_time_based

    @property
    def is_date_based(self) -> bool:
        return not self.is_time_based

    def range(self) -> ValueRange:
        """Outer range of valid values for the field."""
        return self.value.range

    def check_valid_value(self, value: int) -> int:
        """Check that value is valid for this field.

        Raises:
            RangeError: If the value is outside the field's range
        """
        return self.value.range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        """Check that value is valid for this field and fits an int.

        Raises:
            ArithmeticOverflowError: If the value does not fit a 32-bit integer
            RangeError: If the value is outside the field's range
        """
        return self.value.range.check_valid_int_value(value, self)

    def is_supported_by(self, accessor: TemporalAccessor) -> bool:
        return accessor.is_supported_field(self)

    def range_refined_by(self, accessor: TemporalAccessor) -> ValueRange:
        return accessor.range(self)

    def get_from(self, accessor: TemporalAccessor) -> int:
        return accessor.get_long(self)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Any:
        return temporal.with_field(self, new_value)
