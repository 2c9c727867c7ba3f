"""Shared test fixtures for chronoext tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, date, datetime, time, timedelta, timezone
from typing import Any

import pytest

from chronoext.config import PATTERN_ENV_PREFIX, PatternConfig, reset_config
from chronoext.temporal import access
from chronoext.temporal.base import TemporalAccessor
from chronoext.temporal.clock import FixedClock
from chronoext.temporal.common import Chronology
from chronoext.temporal.fields import TemporalField
from chronoext.temporal.queries import Query, TemporalQuery

# 2024-01-03 07:05:09.250 UTC
FIXED_INSTANT = datetime(2024, 1, 3, 7, 5, 9, 250_000, tzinfo=UTC)


class ForeignCalendarValue(TemporalAccessor):
    """Temporal object of a non-ISO calendar system wrapping a stdlib value.

    Exposes the fields of the wrapped value but reports a foreign chronology,
    so ISO-only operations must reject it and conversions must go through
    the LOCAL_TIME query.
    """

    __slots__ = ("_wrapped", "_chronology")

    def __init__(self, wrapped: date | time, chronology: Chronology = Chronology.JAPANESE) -> None:
        self._wrapped = wrapped
        self._chronology = chronology

    def is_supported_field(self, field: TemporalField | None) -> bool:
        return access.is_field_supported(self._wrapped, field)

    def get_long(self, field: TemporalField) -> int:
        return access.get_long(self._wrapped, field)

    def query(self, query: Query) -> Any:
        if query is TemporalQuery.CHRONOLOGY:
            return self._chronology
        return access.query(self._wrapped, query)

    def __repr__(self) -> str:
        return f"ForeignCalendarValue({self._wrapped!r}, {self._chronology})"


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock fixed at 2024-01-03 07:05:09.250 UTC."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def offset_clock() -> FixedClock:
    """Clock fixed at the same instant, in a UTC+02:00 zone (09:05:09 local)."""
    return FixedClock(FIXED_INSTANT, timezone(timedelta(hours=2)))


@pytest.fixture
def foreign_time() -> ForeignCalendarValue:
    """Non-ISO time of day, 09:30:45."""
    return ForeignCalendarValue(time(9, 30, 45))


@pytest.fixture
def foreign_date() -> ForeignCalendarValue:
    """Non-ISO date without a time of day."""
    return ForeignCalendarValue(date(2024, 1, 3))


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate tests from configuration in the environment and from each other."""
    monkeypatch.delenv("CHRONOEXT_CONFIG_FILE", raising=False)
    for name in PatternConfig.names():
        monkeypatch.delenv(PATTERN_ENV_PREFIX + name.upper(), raising=False)
    reset_config()
    yield
    reset_config()


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test (fast, no I/O)")
    config.addinivalue_line("markers", "clock: mark test as reading the system clock")
