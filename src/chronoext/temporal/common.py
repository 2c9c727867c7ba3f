"""Common types shared across the temporal layer.

This module contains the fundamental types used by fields, units and the
bounded sub-day values:
    - Chronology: calendar system identity
    - ValueRange: inclusive range of valid values for a field
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exceptions import ArithmeticOverflowError, RangeError

INT_MIN = -(2**31)  # Smallest value returned by get()
INT_MAX = 2**31 - 1  # Largest value returned by get()


class Chronology(Enum):
    """Calendar system of a temporal object.

    Only ISO is used for calculations. The other members exist so that
    objects from a different calendar system can identify themselves and be
    rejected where ISO is required.
    """

    ISO = "ISO"
    JAPANESE = "Japanese"
    MINGUO = "Minguo"
    THAI_BUDDHIST = "ThaiBuddhist"
    HIJRAH = "Hijrah-umalqura"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValueRange:
    """Inclusive range of valid values for a field.

    Examples:
        >>> ValueRange(0, 23).is_valid_value(23)
        True
        >>> str(ValueRange(1, 24))
        '1 - 24'
    """

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"Minimum value must be less than maximum value: {self.minimum} > {self.maximum}")

    def __str__(self) -> str:
        return f"{self.minimum} - {self.maximum}"

    def is_valid_value(self, value: int) -> bool:
        """True if value lies within the range."""
        return self.minimum <= value <= self.maximum

    def is_int_value(self) -> bool:
        """True if every value in the range fits a 32-bit signed integer."""
        return self.minimum >= INT_MIN and self.maximum <= INT_MAX

    def check_valid_value(self, value: int, field: Any = None) -> int:
        """Validate value against the range.

        Args:
            value: Value to check
            field: Field the value belongs to (used in the error message)

        Returns:
            The value, unchanged

        Raises:
            RangeError: If the value is outside the range
        """
        if not self.is_valid_value(value):
            raise RangeError(self._message(value, field))
        return value

    def check_valid_int_value(self, value: int, field: Any = None) -> int:
        """Validate value against the range and the 32-bit integer limits.

        Raises:
            ArithmeticOverflowError: If the value does not fit a 32-bit integer
            RangeError: If the value is outside the range
        """
        if not INT_MIN <= value <= INT_MAX:
            raise ArithmeticOverflowError(f"Integer overflow: {value}")
        if not self.is_int_value() or not self.is_valid_value(value):
            raise RangeError(self._message(value, field))
        return value

    def _message(self, value: int, field: Any) -> str:
        if field is not None:
            return f"Invalid value for {field} (valid values {self}): {value}"
        return f"Invalid value (valid values {self}): {value}"
