"""Hour-of-day, from 0 to 23.

HourOfDay supports the four hour fields. The clock-hour fields are derived
from the stored value by adding one, so CLOCK_HOUR_OF_DAY is 1 at midnight
and 24 at 23:00, and CLOCK_HOUR_OF_AMPM runs from 1 to 12 in each half day.

Examples:
    >>> HourOfDay.of(7).plus(90, ChronoUnit.MINUTES)
    HourOfDay(08)
    >>> HourOfDay.of(13).get(ChronoField.HOUR_OF_AMPM)
    1
"""

from __future__ import annotations

from ..temporal.common import ValueRange
from ..temporal.fields import ChronoField
from ..temporal.units import ChronoUnit
from .bounded import BoundedFieldKind, BoundedTemporal, FieldMapping

HOUR_KIND = BoundedFieldKind(
    name="HourOfDay",
    field=ChronoField.HOUR_OF_DAY,
    unit=ChronoUnit.HOURS,
    pattern="HH",
    mappings=(
        FieldMapping(
            field=ChronoField.HOUR_OF_AMPM,
            range=ValueRange(0, 11),
            get=lambda v: v % 12,
            set=lambda v, n: (v // 12) * 12 + n,
        ),
        FieldMapping(
            field=ChronoField.CLOCK_HOUR_OF_AMPM,
            range=ValueRange(1, 12),
            get=lambda v: v % 12 + 1,
            set=lambda v, n: (v // 12) * 12 + n - 1,
        ),
        FieldMapping(
            field=ChronoField.HOUR_OF_DAY,
            range=ValueRange(0, 23),
            get=lambda v: v,
            set=lambda v, n: n,
        ),
        FieldMapping(
            field=ChronoField.CLOCK_HOUR_OF_DAY,
            range=ValueRange(1, 24),
            get=lambda v: v + 1,
            set=lambda v, n: n - 1,
        ),
    ),
)


class HourOfDay(BoundedTemporal):
    """Hour of the day (0-23) without date, minute or zone."""

    __slots__ = ()

    KIND = HOUR_KIND

    MIN_VALUE = HOUR_KIND.minimum
    MAX_VALUE = HOUR_KIND.maximum
