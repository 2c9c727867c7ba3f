"""Temporal amounts.

datetime.timedelta is the host duration type. It does not know how to add
itself to a temporal object, so add_amount() and subtract_amount() apply it
the same way a duration does: whole seconds first, then the remaining
microseconds.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from .units import ChronoUnit

SECONDS_PER_DAY = 86_400


def duration_parts(duration: timedelta) -> tuple[int, int]:
    """Split a timedelta into (seconds, microseconds).

    Seconds carry the sign; microseconds are always 0-999999.

    Examples:
        >>> duration_parts(timedelta(hours=-1))
        (-3600, 0)
    """
    return duration.days * SECONDS_PER_DAY + duration.seconds, duration.microseconds


def add_amount(temporal: Any, amount: Any) -> Any:
    """Add a timedelta or TemporalAmount to a temporal object."""
    if isinstance(amount, timedelta):
        seconds, micros = duration_parts(amount)
        result = temporal
        if seconds != 0:
            result = result.plus(seconds, ChronoUnit.SECONDS)
        if micros != 0:
            result = result.plus(micros, ChronoUnit.MICROS)
        return result
    return amount.add_to(temporal)


def subtract_amount(temporal: Any, amount: Any) -> Any:
    """Subtract a timedelta or TemporalAmount from a temporal object."""
    if isinstance(amount, timedelta):
        seconds, micros = duration_parts(amount)
        result = temporal
        if seconds != 0:
            result = result.minus(seconds, ChronoUnit.SECONDS)
        if micros != 0:
            result = result.minus(micros, ChronoUnit.MICROS)
        return result
    return amount.subtract_from(temporal)
