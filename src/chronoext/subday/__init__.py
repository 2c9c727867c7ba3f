"""Bounded sub-day values: hour-of-day, minute-of-hour and second-of-minute."""

from __future__ import annotations

from .bounded import BoundedFieldKind, BoundedTemporal, FieldMapping
from .hour import HourOfDay
from .minute import MinuteOfHour
from .second import SecondOfMinute

__all__ = [
    "BoundedFieldKind",
    "BoundedTemporal",
    "FieldMapping",
    "HourOfDay",
    "MinuteOfHour",
    "SecondOfMinute",
]
