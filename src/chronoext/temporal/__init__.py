"""Host temporal layer.

Interfaces, fields, units, queries, clocks and formatting shared by the
bounded sub-day values, together with the bridge to the stdlib datetime
types.
"""

from __future__ import annotations

from .base import Temporal, TemporalAccessor, TemporalAdjuster, TemporalAmount
from .clock import Clock, FixedClock, SystemClock
from .common import Chronology, ValueRange
from .fields import ChronoField, TemporalField
from .format import ParsedFields, TemporalFormatter
from .queries import Query, TemporalQuery
from .units import ChronoUnit, TemporalUnit

__all__ = [
    "ChronoField",
    "ChronoUnit",
    "Chronology",
    "Clock",
    "FixedClock",
    "ParsedFields",
    "Query",
    "SystemClock",
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalAmount",
    "TemporalField",
    "TemporalFormatter",
    "TemporalQuery",
    "TemporalUnit",
    "ValueRange",
]
