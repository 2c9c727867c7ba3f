"""Wall clocks.

A Clock provides the current instant and the zone used to turn it into a
local date and time. SystemClock reads the system time; FixedClock always
returns the same instant, which makes now() deterministic in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo


def resolve_zone(zone: tzinfo | str | None) -> tzinfo | None:
    """Turn a zone key such as "Europe/Copenhagen" into a tzinfo.

    None stays None and means the system default zone.
    """
    if isinstance(zone, str):
        return ZoneInfo(zone)
    return zone


class Clock(ABC):
    """Source of the current instant together with a zone."""

    @property
    @abstractmethod
    def zone(self) -> tzinfo | None:
        """Zone of the clock (None = system default zone)."""

    @abstractmethod
    def instant(self) -> datetime:
        """Current instant as an aware UTC datetime."""

    def now(self) -> datetime:
        """Current date and time in the clock's zone (aware)."""
        if self.zone is None:
            return self.instant().astimezone()
        return self.instant().astimezone(self.zone)


class SystemClock(Clock):
    """Clock backed by the system time."""

    _zone: tzinfo | None

    def __init__(self, zone: tzinfo | str | None = None) -> None:
        """Initialize clock.

        Args:
            zone: tzinfo, zone key, or None for the system default zone
        """
        self._zone = resolve_zone(zone)

    @property
    def zone(self) -> tzinfo | None:
        return self._zone

    def instant(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return f"SystemClock(zone={self._zone!r})"


class FixedClock(Clock):
    """Clock that always returns the same instant."""

    _instant: datetime
    _zone: tzinfo | None

    def __init__(self, instant: datetime, zone: tzinfo | str | None = UTC) -> None:
        """Initialize clock.

        Args:
            instant: Aware datetime to return; naive values are taken as UTC
            zone: tzinfo, zone key, or None for the system default zone
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._instant = instant.astimezone(UTC)
        self._zone = resolve_zone(zone)

    @property
    def zone(self) -> tzinfo | None:
        return self._zone

    def instant(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock(instant={self._instant.isoformat()}, zone={self._zone!r})"
