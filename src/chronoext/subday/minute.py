"""Minute-of-hour, from 0 to 59."""

from __future__ import annotations

from ..temporal.common import ValueRange
from ..temporal.fields import ChronoField
from ..temporal.units import ChronoUnit
from .bounded import BoundedFieldKind, BoundedTemporal, FieldMapping

MINUTE_KIND = BoundedFieldKind(
    name="MinuteOfHour",
    field=ChronoField.MINUTE_OF_HOUR,
    unit=ChronoUnit.MINUTES,
    pattern="mm",
    mappings=(
        FieldMapping(
            field=ChronoField.MINUTE_OF_HOUR,
            range=ValueRange(0, 59),
            get=lambda v: v,
            set=lambda v, n: n,
        ),
    ),
)


class MinuteOfHour(BoundedTemporal):
    """Minute of the hour (0-59)."""

    __slots__ = ()

    KIND = MINUTE_KIND

    MIN_VALUE = MINUTE_KIND.minimum
    MAX_VALUE = MINUTE_KIND.maximum
