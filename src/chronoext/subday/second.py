"""Second-of-minute, from 0 to 59.

Leap seconds are not represented.
"""

from __future__ import annotations

from ..temporal.common import ValueRange
from ..temporal.fields import ChronoField
from ..temporal.units import ChronoUnit
from .bounded import BoundedFieldKind, BoundedTemporal, FieldMapping

SECOND_KIND = BoundedFieldKind(
    name="SecondOfMinute",
    field=ChronoField.SECOND_OF_MINUTE,
    unit=ChronoUnit.SECONDS,
    pattern="ss",
    mappings=(
        FieldMapping(
            field=ChronoField.SECOND_OF_MINUTE,
            range=ValueRange(0, 59),
            get=lambda v: v,
            set=lambda v, n: n,
        ),
    ),
)


class SecondOfMinute(BoundedTemporal):
    __slots__ = ()

    KIND = SECOND_KIND

    MIN_VALUE = SECOND_KIND.minimum
    MAX_VALUE = SECOND_KIND.maximum
