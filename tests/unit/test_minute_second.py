"""Unit tests for MinuteOfHour and SecondOfMinute."""

from __future__ import annotations

import pickle
from datetime import date, datetime, time, timedelta
from typing import Any

import pytest

from chronoext import (
    ChronoField,
    ChronologyMismatchError,
    ChronoUnit,
    ConversionError,
    HourOfDay,
    MinuteOfHour,
    ParseError,
    RangeError,
    SecondOfMinute,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from chronoext.subday import BoundedTemporal
from chronoext.temporal import Chronology, FixedClock, TemporalQuery, ValueRange

# =============================================================================
# Test Constants - Duplicated from src for test isolation
# =============================================================================

TEST_MIN_VALUE = 0
TEST_MAX_VALUE = 59

# (kind, natural field, natural unit)
TEST_KINDS = [
    (MinuteOfHour, ChronoField.MINUTE_OF_HOUR, ChronoUnit.MINUTES),
    (SecondOfMinute, ChronoField.SECOND_OF_MINUTE, ChronoUnit.SECONDS),
]


# =============================================================================
# Shared Behaviour Tests
# =============================================================================


@pytest.mark.parametrize(("kind", "field", "unit"), TEST_KINDS)
class TestSixtyValueKinds:
    """Behaviour shared by the two 0-59 kinds."""

    def test_of_range(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test that 0-59 is accepted and -1 and 60 are rejected."""
        assert kind.of(TEST_MIN_VALUE).value == TEST_MIN_VALUE
        assert kind.of(TEST_MAX_VALUE).value == TEST_MAX_VALUE
        with pytest.raises(RangeError, match=f"Invalid value for {field}"):
            kind.of(-1)
        with pytest.raises(RangeError, match=f"Invalid value for {field}"):
            kind.of(60)

    def test_bounds_constants(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test MIN_VALUE and MAX_VALUE."""
        assert kind.MIN_VALUE == TEST_MIN_VALUE  # type: ignore[attr-defined]
        assert kind.MAX_VALUE == TEST_MAX_VALUE  # type: ignore[attr-defined]

    def test_only_natural_field_supported(
        self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit
    ) -> None:
        """Test that only the natural field is supported."""
        value = kind.of(30)
        assert value.is_supported_field(field) is True
        assert value.is_supported_field(ChronoField.HOUR_OF_DAY) is False
        assert value.is_supported_field(None) is False
        assert value.range(field) == ValueRange(0, 59)
        assert value.get(field) == 30
        with pytest.raises(UnsupportedFieldError):
            value.get(ChronoField.HOUR_OF_DAY)

    def test_only_natural_unit_supported(
        self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit
    ) -> None:
        """Test that only the natural unit is supported."""
        value = kind.of(30)
        assert value.is_supported_unit(unit) is True
        assert value.is_supported_unit(ChronoUnit.HOURS) is False
        assert value.is_supported_unit(None) is False

    def test_with_field(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test setting the natural field."""
        assert kind.of(30).with_field(field, 45) == kind.of(45)
        with pytest.raises(RangeError):
            kind.of(30).with_field(field, 60)
        with pytest.raises(UnsupportedFieldError):
            kind.of(30).with_field(ChronoField.HOUR_OF_DAY, 1)

    def test_bounded_arithmetic(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test plus/minus in the natural unit without wraparound."""
        value = kind.of(30)
        assert value.plus(0, unit) is value
        assert value.plus(29, unit) == kind.of(59)
        assert kind.of(30).minus(30, unit) == kind.of(0)
        with pytest.raises(RangeError):
            kind.of(59).plus(1, unit)
        with pytest.raises(RangeError):
            kind.of(0).minus(1, unit)

    def test_coarser_unit_raises(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test that hours and days are unsupported."""
        with pytest.raises(UnsupportedUnitError):
            kind.of(30).plus(1, ChronoUnit.HOURS)
        with pytest.raises(UnsupportedUnitError):
            kind.of(30).plus(1, ChronoUnit.DAYS)

    def test_until(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test the signed difference in the natural unit."""
        assert kind.of(10).until(kind.of(50), unit) == 40
        assert kind.of(50).until(kind.of(10), unit) == -40
        with pytest.raises(UnsupportedUnitError):
            kind.of(10).until(kind.of(50), ChronoUnit.HOURS)

    def test_query(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test chronology and precision."""
        assert kind.of(30).query(TemporalQuery.CHRONOLOGY) is Chronology.ISO
        assert kind.of(30).query(TemporalQuery.PRECISION) is unit

    def test_parse(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test lenient parsing and its inverse relation to str()."""
        assert kind.parse("05") == kind.of(5)
        assert kind.parse("5") == kind.of(5)
        for value in range(TEST_MIN_VALUE, TEST_MAX_VALUE + 1):
            assert kind.parse(str(kind.of(value))).value == value
        with pytest.raises(ParseError):
            kind.parse("60")

    def test_from_date_raises(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test that a date cannot be converted."""
        with pytest.raises(ConversionError, match=f"Unable to obtain {kind.__name__} from TemporalAccessor"):
            kind.from_temporal(date(2024, 1, 3))

    def test_foreign_calendar(
        self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit, foreign_time: Any
    ) -> None:
        """Test conversion from and adjustment of non-ISO values."""
        assert kind.from_temporal(foreign_time) == kind.of(30 if kind is MinuteOfHour else 45)
        with pytest.raises(ChronologyMismatchError):
            kind.of(1).adjust_into(foreign_time)

    def test_ordering(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test ordering by value."""
        assert kind.of(30).is_before(kind.of(31))
        assert kind.of(31).is_after(kind.of(30))
        assert kind.of(30) < kind.of(31)
        assert kind.of(30).compare_to(kind.of(30)) == 0

    def test_text_and_pickle(self, kind: type[BoundedTemporal], field: ChronoField, unit: ChronoUnit) -> None:
        """Test str, repr and pickling."""
        value = kind.of(5)
        assert str(value) == "05"
        assert repr(value) == f"{kind.__name__}(05)"
        assert pickle.loads(pickle.dumps(value)) == value


# =============================================================================
# MinuteOfHour Tests
# =============================================================================


class TestMinuteOfHour:
    """Tests specific to MinuteOfHour."""

    def test_now(self, fixed_clock: FixedClock) -> None:
        """Test reading the minute from a fixed clock."""
        assert MinuteOfHour.now(fixed_clock) == MinuteOfHour.of(5)

    @pytest.mark.parametrize(
        ("amount", "unit", "expected"),
        [
            (90, ChronoUnit.SECONDS, 11),
            (-90, ChronoUnit.SECONDS, 9),
            (59, ChronoUnit.SECONDS, 10),
            (120_000, ChronoUnit.MILLIS, 12),
        ],
    )
    def test_finer_units_truncate(self, amount: int, unit: ChronoUnit, expected: int) -> None:
        """Test that seconds and finer are converted to whole minutes toward zero."""
        assert MinuteOfHour.of(10).plus(amount, unit) == MinuteOfHour.of(expected)

    def test_plus_timedelta(self) -> None:
        """Test adding a timedelta in whole minutes."""
        assert MinuteOfHour.of(10) + timedelta(minutes=15, seconds=30) == MinuteOfHour.of(25)
        assert MinuteOfHour.of(10) - timedelta(minutes=10) == MinuteOfHour.of(0)

    def test_plus_one_at_max_raises(self) -> None:
        """Test that 59 + 1 minute is out of range."""
        with pytest.raises(RangeError):
            MinuteOfHour.of(59).plus(1, ChronoUnit.MINUTES)

    def test_adjust_into(self) -> None:
        """Test setting the minute of stdlib values."""
        assert MinuteOfHour.of(5).adjust_into(time(13, 45, 30)) == time(13, 5, 30)
        assert MinuteOfHour.of(5).adjust_into(datetime(2024, 1, 3, 13, 45)) == datetime(2024, 1, 3, 13, 5)

    def test_amounts(self) -> None:
        """Test amounts is a duration of value minutes."""
        assert MinuteOfHour.of(30).amounts == timedelta(minutes=30)

    def test_not_equal_to_hour(self) -> None:
        """Test that kinds never compare equal."""
        assert MinuteOfHour.of(5) != HourOfDay.of(5)


# =============================================================================
# SecondOfMinute Tests
# =============================================================================


class TestSecondOfMinute:
    """Tests specific to SecondOfMinute."""

    def test_now(self, fixed_clock: FixedClock) -> None:
        """Test reading the second from a fixed clock."""
        assert SecondOfMinute.now(fixed_clock) == SecondOfMinute.of(9)

    @pytest.mark.parametrize(
        ("amount", "unit", "expected"),
        [
            (1_500, ChronoUnit.MILLIS, 11),
            (-1_500, ChronoUnit.MILLIS, 9),
            (999_999, ChronoUnit.MICROS, 10),
            (2_000_000_000, ChronoUnit.NANOS, 12),
        ],
    )
    def test_finer_units_truncate(self, amount: int, unit: ChronoUnit, expected: int) -> None:
        """Test that sub-second units are converted to whole seconds toward zero."""
        assert SecondOfMinute.of(10).plus(amount, unit) == SecondOfMinute.of(expected)

    def test_plus_timedelta_ignores_sub_second(self) -> None:
        """Test that microseconds of a timedelta do not add a second."""
        assert SecondOfMinute.of(10).plus(timedelta(seconds=5, microseconds=999_999)) == SecondOfMinute.of(15)

    def test_minutes_unsupported(self) -> None:
        """Test that minutes are coarser than a second and unsupported."""
        with pytest.raises(UnsupportedUnitError, match="Unsupported unit: Minutes"):
            SecondOfMinute.of(10).plus(1, ChronoUnit.MINUTES)

    def test_is_before(self) -> None:
        """Test 30 is before 31."""
        assert SecondOfMinute.of(30).is_before(SecondOfMinute.of(31))
        assert not SecondOfMinute.of(31).is_before(SecondOfMinute.of(30))

    def test_adjust_into(self) -> None:
        """Test setting the second of stdlib values."""
        assert SecondOfMinute.of(5).adjust_into(time(13, 45, 30, 123)) == time(13, 45, 5, 123)
