"""Uniform access to temporal objects.

Generic code in this library reads and adjusts temporal objects through the
functions in this module. They accept both TemporalAccessor implementations
and the stdlib datetime types:

    - datetime.time: time fields
    - datetime.date: date fields
    - datetime.datetime: time and date fields

Stdlib values are always ISO. Field semantics for the stdlib types follow the
ISO clock: CLOCK_HOUR_OF_DAY is 24 at midnight, CLOCK_HOUR_OF_AMPM is 12 at
noon and midnight.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from typing import Any

from ..exceptions import ChronoError, RangeError, UnsupportedFieldError
from .base import Temporal, TemporalAccessor
from .common import Chronology, ValueRange
from .fields import ChronoField, TemporalField
from .queries import Query, TemporalQuery
from .units import ChronoUnit

StdlibTemporal = date | time  # datetime is a subclass of date

# =============================================================================
# Stdlib Field Descriptors
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class _StdlibFieldDescriptor:
    field: ChronoField
    get: Callable[[Any], int]  # Reads the field value
    set: Callable[[Any, int], Any]  # Returns a copy with the field set


def _set_hour_of_ampm(value: Any, new_value: int) -> Any:
    return value.replace(hour=(value.hour // 12) * 12 + new_value)


def _set_clock_hour_of_ampm(value: Any, new_value: int) -> Any:
    return _set_hour_of_ampm(value, 0 if new_value == 12 else new_value)


def _set_day_of_week(value: Any, new_value: int) -> Any:
    return value + timedelta(days=new_value - value.isoweekday())


_TimeFieldTable: tuple[_StdlibFieldDescriptor, ...] = (
    _StdlibFieldDescriptor(
        field=ChronoField.NANO_OF_SECOND,
        get=lambda t: t.microsecond * 1_000,
        set=lambda t, v: t.replace(microsecond=v // 1_000),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.MICRO_OF_SECOND,
        get=lambda t: t.microsecond,
        set=lambda t, v: t.replace(microsecond=v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.MILLI_OF_SECOND,
        get=lambda t: t.microsecond // 1_000,
        set=lambda t, v: t.replace(microsecond=v * 1_000 + t.microsecond % 1_000),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.SECOND_OF_MINUTE,
        get=lambda t: t.second,
        set=lambda t, v: t.replace(second=v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.MINUTE_OF_HOUR,
        get=lambda t: t.minute,
        set=lambda t, v: t.replace(minute=v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.HOUR_OF_AMPM,
        get=lambda t: t.hour % 12,
        set=_set_hour_of_ampm,
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.CLOCK_HOUR_OF_AMPM,
        get=lambda t: t.hour % 12 or 12,
        set=_set_clock_hour_of_ampm,
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.HOUR_OF_DAY,
        get=lambda t: t.hour,
        set=lambda t, v: t.replace(hour=v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.CLOCK_HOUR_OF_DAY,
        get=lambda t: t.hour or 24,
        set=lambda t, v: t.replace(hour=0 if v == 24 else v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.AMPM_OF_DAY,
        get=lambda t: t.hour // 12,
        set=lambda t, v: t.replace(hour=v * 12 + t.hour % 12),
    ),
)

_DateFieldTable: tuple[_StdlibFieldDescriptor, ...] = (
    _StdlibFieldDescriptor(
        field=ChronoField.DAY_OF_WEEK,
        get=lambda d: d.isoweekday(),
        set=_set_day_of_week,
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.DAY_OF_MONTH,
        get=lambda d: d.day,
        set=lambda d, v: d.replace(day=v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.MONTH_OF_YEAR,
        get=lambda d: d.month,
        set=lambda d, v: d.replace(month=v),
    ),
    _StdlibFieldDescriptor(
        field=ChronoField.YEAR,
        get=lambda d: d.year,
        set=lambda d, v: d.replace(year=v),
    ),
)


@lru_cache(maxsize=8)
def _field_table(kind: type) -> dict[ChronoField, _StdlibFieldDescriptor]:
    """Field descriptors supported by a stdlib type."""
    if issubclass(kind, datetime):
        descriptors = _TimeFieldTable + _DateFieldTable
    elif issubclass(kind, date):
        descriptors = _DateFieldTable
    elif issubclass(kind, time):
        descriptors = _TimeFieldTable
    else:
        descriptors = ()
    return {descriptor.field: descriptor for descriptor in descriptors}


def _stdlib_descriptor(value: StdlibTemporal, field: TemporalField) -> _StdlibFieldDescriptor:
    if isinstance(field, ChronoField):
        descriptor = _field_table(type(value)).get(field)
        if descriptor is not None:
            return descriptor
    raise UnsupportedFieldError(f"Unsupported field: {field}")


# =============================================================================
# Access Functions
# =============================================================================


def type_name(value: Any) -> str:
    """Qualified type name of a value, for diagnostics."""
    kind = type(value)
    return f"{kind.__module__}.{kind.__qualname__}"


def is_field_supported(accessor: Any, field: TemporalField | None) -> bool:
    """True if the field can be read from the accessor."""
    if field is None:
        return False
    if isinstance(accessor, TemporalAccessor):
        return accessor.is_supported_field(field)
    if isinstance(field, ChronoField):
        return field in _field_table(type(accessor))
    return field.is_supported_by(accessor)


def field_range(accessor: Any, field: TemporalField) -> ValueRange:
    """Range of valid values for the field on the accessor."""
    if isinstance(accessor, TemporalAccessor):
        return accessor.range(field)
    _stdlib_descriptor(accessor, field)
    return field.range()  # type: ignore[union-attr]


def get_long(accessor: Any, field: TemporalField) -> int:
    """Read a field from the accessor.

    Raises:
        UnsupportedFieldError: If the accessor does not support the field
    """
    if isinstance(accessor, TemporalAccessor):
        return accessor.get_long(field)
    return _stdlib_descriptor(accessor, field).get(accessor)


def get(accessor: Any, field: TemporalField) -> int:
    """Read a field from the accessor, checked against the field's range."""
    if isinstance(accessor, TemporalAccessor):
        return accessor.get(field)
    return field_range(accessor, field).check_valid_int_value(get_long(accessor, field), field)


def with_field(temporal: Any, field: TemporalField, new_value: int) -> Any:
    """Copy of the temporal object with the field set.

    Raises:
        UnsupportedFieldError: If the temporal object does not support the field
        RangeError: If new_value is not valid for the field
    """
    if isinstance(temporal, Temporal):
        return temporal.with_field(field, new_value)
    descriptor = _stdlib_descriptor(temporal, field)
    descriptor.field.check_valid_value(new_value)
    try:
        return descriptor.set(temporal, new_value)
    except (ValueError, OverflowError) as e:
        raise RangeError(f"Invalid value for {field}: {new_value} ({e})") from e


def query(accessor: Any, temporal_query: Query) -> Any:
    """Answer a query against the accessor."""
    if isinstance(accessor, TemporalAccessor):
        return accessor.query(temporal_query)
    if not isinstance(temporal_query, TemporalQuery):
        return temporal_query(accessor)
    if temporal_query is TemporalQuery.CHRONOLOGY:
        return Chronology.ISO if isinstance(accessor, date) else None
    if temporal_query is TemporalQuery.PRECISION:
        if isinstance(accessor, datetime | time):
            return ChronoUnit.MICROS
        return ChronoUnit.DAYS if isinstance(accessor, date) else None
    if temporal_query is TemporalQuery.LOCAL_TIME:
        if isinstance(accessor, datetime):
            return accessor.time()
        return accessor if isinstance(accessor, time) else None
    if temporal_query is TemporalQuery.LOCAL_DATE_TIME:
        return accessor.replace(tzinfo=None) if isinstance(accessor, datetime) else None
    if isinstance(accessor, datetime):
        return accessor.date()
    return accessor if isinstance(accessor, date) else None


def chronology_of(accessor: Any) -> Chronology:
    """Calendar system of the accessor, ISO when the accessor does not say."""
    chronology = query(accessor, TemporalQuery.CHRONOLOGY)
    return chronology if chronology is not None else Chronology.ISO


def local_time_of(accessor: Any) -> time:
    """Time of day of the accessor.

    Raises:
        ChronoError: If the accessor has no time of day
    """
    result = query(accessor, TemporalQuery.LOCAL_TIME)
    if result is None:
        raise ChronoError(f"Unable to obtain time from TemporalAccessor: {accessor!r} of type {type_name(accessor)}")
    return result
