"""Canonical ISO 8601 rendering of durations."""

from __future__ import annotations

from decimal import Decimal

from pyisodur._converter import from_ticks
from pyisodur._duration import Duration

ZERO_DURATION = "PT0S"

# (field, designator), in output order
PERIOD_PARTS = (
    ("years", "Y"),
    ("months", "M"),
    ("weeks", "W"),
    ("days", "D"),
)

TIME_PARTS = (
    ("hours", "H"),
    ("minutes", "M"),
    ("seconds", "S"),
)


def format(duration: Duration, *, use_original: bool = True) -> str:
    """Render a Duration as ISO 8601 text.

    Args:
        duration: The duration to render.
        use_original: If True and the duration still holds the text it was
            parsed from, return that text unchanged.

    Returns:
        The duration string, e.g. ``P1DT2H`` or ``-PT10S``. A zero duration
        renders as ``PT0S`` whatever its sign.
    """
    if use_original and duration.original_text is not None:
        return duration.original_text

    out = ["P"]
    for name, designator in PERIOD_PARTS:
        value = getattr(duration, name)
        if value != 0:
            out.append(format_number(value) + designator)

    time_started = False
    for name, designator in TIME_PARTS:
        value = getattr(duration, name)
        if value != 0:
            if not time_started:
                out.append("T")
                time_started = True
            out.append(format_number(value) + designator)

    if len(out) == 1:
        return ZERO_DURATION

    result = "".join(out)
    if duration.negative:
        return "-" + result
    return result


def format_ticks(ticks: int) -> str:
    """Render a signed nanosecond count as ISO 8601 text."""
    return format(from_ticks(ticks))


def format_number(value: float) -> str:
    """Shortest decimal that reads back as ``value``, without an exponent.

    >>> format_number(4.0)
    '4'
    >>> format_number(1e-13)
    '0.0000000000001'
    """
    d = Decimal(repr(float(value))).normalize()
    return f"{d:f}"
