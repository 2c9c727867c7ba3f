"""Units of time.

Classes:
    - TemporalUnit: Protocol every unit implements (custom units included)
    - ChronoUnit: Standard set of units, from nanoseconds to years

A unit measures an amount of time. ChronoUnit members delegate addition and
difference calculation back to the temporal object, which decides whether the
unit is supported.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .base import Temporal

# =============================================================================
# Unit Durations (nanoseconds)
# =============================================================================


NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR
NANOS_PER_YEAR = 31_556_952 * NANOS_PER_SECOND  # Average Gregorian year (365.2425 days)


@runtime_checkable
class TemporalUnit(Protocol):
    """A unit of date-time, such as days or hours."""

    def is_supported_by(self, temporal: Temporal) -> bool: ...

    def add_to(self, temporal: Temporal, amount: int) -> Any: ...

    def between(self, start: Temporal, end: Temporal) -> int: ...


class _UnitDescriptor(NamedTuple):
    display_name: str  # Name used in messages
    nanos: int  # Estimated duration in nanoseconds
    time_based: bool  # Exact duration shorter than a day


class ChronoUnit(Enum):
    """Standard set of date-time units.

    Each member carries its display name and estimated duration.
    """

    NANOS = _UnitDescriptor("Nanos", 1, True)
    MICROS = _UnitDescriptor("Micros", NANOS_PER_MICRO, True)
    MILLIS = _UnitDescriptor("Millis", NANOS_PER_MILLI, True)
    SECONDS = _UnitDescriptor("Seconds", NANOS_PER_SECOND, True)
    MINUTES = _UnitDescriptor("Minutes", NANOS_PER_MINUTE, True)
    HOURS = _UnitDescriptor("Hours", NANOS_PER_HOUR, True)
    HALF_DAYS = _UnitDescriptor("HalfDays", NANOS_PER_DAY // 2, True)
    DAYS = _UnitDescriptor("Days", NANOS_PER_DAY, False)
    WEEKS = _UnitDescriptor("Weeks", 7 * NANOS_PER_DAY, False)
    MONTHS = _UnitDescriptor("Months", NANOS_PER_YEAR // 12, False)
    YEARS = _UnitDescriptor("Years", NANOS_PER_YEAR, False)

    def __str__(self) -> str:
        return self.value.display_name

    @property
    def nanos(self) -> int:
        """Estimated duration of the unit in nanoseconds."""
        return self.value.nanos

    @property
    def is_time_based(self) -> bool:
        return self.value.time_based

    @property
    def is_date_based(self) -> bool:
        return not self.value.time_based

    def is_finer_than(self, other: ChronoUnit) -> bool:
        """True if this unit is shorter than other."""
        return self.nanos < other.nanos

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported_unit(self)

    def add_to(self, temporal: Temporal, amount: int) -> Any:
        return temporal.plus(amount, self)

    def between(self, start: Temporal, end: Temporal) -> int:
        return start.until(end, self)
