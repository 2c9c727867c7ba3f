"""Temporal capability set.

Interfaces implemented by every temporal object in this library:
    - TemporalAccessor: read-only access to fields and queries
    - Temporal: accessor that also supports adjustment and arithmetic
    - TemporalAdjuster: strategy that adjusts a temporal object
    - TemporalAmount: amount of time that can be added to a temporal object

The stdlib date/time types do not implement these interfaces; see the access
module for how they take part in the same operations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, Self, runtime_checkable

from ..exceptions import UnsupportedFieldError
from .common import ValueRange
from .fields import ChronoField, TemporalField
from .queries import Query, TemporalQuery
from .units import TemporalUnit


@runtime_checkable
class TemporalAdjuster(Protocol):
    """Strategy for adjusting a temporal object."""

    def adjust_into(self, temporal: Any) -> Any: ...


@runtime_checkable
class TemporalAmount(Protocol):
    """Amount of time, such as a duration, that knows how to apply itself."""

    def add_to(self, temporal: Any) -> Any: ...

    def subtract_from(self, temporal: Any) -> Any: ...


class TemporalAccessor(ABC):
    """Read-only access to a temporal object."""

    __slots__ = ()

    @abstractmethod
    def is_supported_field(self, field: TemporalField | None) -> bool:
        """True if the field can be queried with range(), get() and get_long()."""

    @abstractmethod
    def get_long(self, field: TemporalField) -> int:
        """Value of the field.

        Raises:
            UnsupportedFieldError: If the field is not supported
        """

    def range(self, field: TemporalField) -> ValueRange:
        """Range of valid values for the field.

        Raises:
            UnsupportedFieldError: If the field is not supported
        """
        if isinstance(field, ChronoField):
            if self.is_supported_field(field):
                return field.range()
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """Value of the field, validated against its range and the int limits.

        Raises:
            UnsupportedFieldError: If the field is not supported
            RangeError: If the value is outside the field's range
            ArithmeticOverflowError: If the value does not fit a 32-bit integer
        """
        return self.range(field).check_valid_int_value(self.get_long(field), field)

    def query(self, query: Query) -> Any:
        """Answer a query.

        Well-known queries are answered with None unless overridden;
        callables are invoked with this object.
        """
        if isinstance(query, TemporalQuery):
            return None
        return query(self)


class Temporal(TemporalAccessor):
    """Temporal object that supports adjustment and arithmetic."""

    __slots__ = ()

    @abstractmethod
    def is_supported_unit(self, unit: TemporalUnit | None) -> bool:
        """True if the unit can be used with plus(), minus() and until()."""

    @abstractmethod
    def with_field(self, field: TemporalField, new_value: int) -> Self:
        """Copy of this object with the field set to new_value."""

    @abstractmethod
    def plus(self, amount: Any, unit: TemporalUnit | None = None) -> Self:
        """Copy of this object with the amount added.

        Args:
            amount: TemporalAmount or timedelta when unit is None, else an int
            unit: Unit of the amount
        """

    @abstractmethod
    def until(self, end_exclusive: Any, unit: TemporalUnit) -> int:
        """Amount of time until another temporal object, in the given unit."""

    def minus(self, amount: Any, unit: TemporalUnit | None = None) -> Self:
        """Copy of this object with the amount subtracted."""
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def with_adjuster(self, adjuster: TemporalAdjuster) -> Any:
        """Adjusted copy of this object."""
        return adjuster.adjust_into(self)
