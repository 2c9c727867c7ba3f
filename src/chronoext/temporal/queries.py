"""Standard queries against temporal objects.

A query is either one of the TemporalQuery members below or any callable
taking the temporal object and returning the result.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any, TypeAlias


class TemporalQuery(Enum):
    """Well-known queries answered by temporal objects themselves.

    - CHRONOLOGY: calendar system (Chronology) or None
    - PRECISION: smallest supported unit (ChronoUnit) or None
    - LOCAL_TIME: datetime.time or None
    - LOCAL_DATE: datetime.date or None
    - LOCAL_DATE_TIME: naive datetime.datetime or None
    """

    CHRONOLOGY = auto()
    PRECISION = auto()
    LOCAL_TIME = auto()
    LOCAL_DATE = auto()
    LOCAL_DATE_TIME = auto()


Query: TypeAlias = TemporalQuery | Callable[[Any], Any]
