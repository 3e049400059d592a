"""Conversion between Duration and elapsed nanoseconds ("ticks").

Months and years are converted with the fixed lengths in ``_constants``
(730 and 8760 hours), so any duration that carries them is an approximation
of real elapsed time.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from pyisodur._constants import (
    NS_PER_DAY,
    NS_PER_HOUR,
    NS_PER_MICROSECOND,
    NS_PER_MINUTE,
    NS_PER_MONTH,
    NS_PER_SECOND,
    NS_PER_WEEK,
    NS_PER_YEAR,
    TICKS_MAX,
    TICKS_MIN,
)
from pyisodur._duration import Duration

logger = logging.getLogger(__name__)

# Field -> nanoseconds per unit, largest unit first
UNIT_NANOSECONDS: dict[str, int] = {
    "years": NS_PER_YEAR,
    "months": NS_PER_MONTH,
    "weeks": NS_PER_WEEK,
    "days": NS_PER_DAY,
    "hours": NS_PER_HOUR,
    "minutes": NS_PER_MINUTE,
    "seconds": NS_PER_SECOND,
}


def to_ticks(duration: Duration) -> int:
    """Convert a Duration to a signed nanosecond count.

    Each field is multiplied by its unit length and rounded to the nearest
    nanosecond (half away from zero) before the products are summed. The
    result saturates to the signed 64-bit range.
    """
    total = 0
    for name, unit in UNIT_NANOSECONDS.items():
        value = getattr(duration, name)
        if value == 0 or math.isnan(value):
            continue
        product = value * unit
        if math.isinf(product):
            # Beyond either end of the range once the sign is applied.
            total = -TICKS_MIN
            break
        total += _round_half_up(product)

    if duration.negative:
        total = -total
    return _saturate(total)


def from_ticks(ticks: int) -> Duration:
    """Decompose a signed nanosecond count into a Duration.

    Units are taken largest first (year, month, week, day, hour, minute),
    each with floor division; seconds keep the remainder, fractional part
    included.
    """
    ticks = _saturate(int(ticks))
    duration = Duration(negative=ticks < 0)
    remaining = abs(ticks)

    for name, unit in UNIT_NANOSECONDS.items():
        if name == "seconds":
            break
        if remaining >= unit:
            count, remaining = divmod(remaining, unit)
            setattr(duration, name, count)

    duration.seconds = remaining / NS_PER_SECOND
    return duration


def to_timedelta(duration: Duration) -> timedelta:
    """Convert a Duration to a timedelta, rounded to whole microseconds."""
    ticks = to_ticks(duration)
    micros, rest = divmod(abs(ticks), NS_PER_MICROSECOND)
    if rest * 2 >= NS_PER_MICROSECOND:
        micros += 1
    td = timedelta(microseconds=micros)
    return -td if ticks < 0 else td


def from_timedelta(td: timedelta) -> Duration:
    """Convert a timedelta to a Duration through its exact nanosecond count."""
    ticks = ((td.days * 86400 + td.seconds) * 1_000_000 + td.microseconds) * NS_PER_MICROSECOND
    return from_ticks(ticks)


def _round_half_up(value: float) -> int:
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def _saturate(ticks: int) -> int:
    if ticks > TICKS_MAX:
        logger.debug("tick count %d saturated to %d", ticks, TICKS_MAX)
        return TICKS_MAX
    if ticks < TICKS_MIN:
        logger.debug("tick count %d saturated to %d", ticks, TICKS_MIN)
        return TICKS_MIN
    return ticks
