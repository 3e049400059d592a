"""Unit lengths and resource limits for ISO 8601 duration handling.

Months and years have no single calendar-exact length, so they are fixed
approximations and part of the public contract: one month is 730 hours and
one year is 8760 hours (365 days, no leap-year adjustment).
"""

HOURS_PER_DAY = 24
HOURS_PER_WEEK = HOURS_PER_DAY * 7
HOURS_PER_MONTH = 730
"""Fixed month length in hours (HOURS_PER_YEAR / 12, about 30.417 days)."""
HOURS_PER_YEAR = 8760
"""Fixed year length in hours (365 days)."""

NS_PER_SECOND = 1_000_000_000
NS_PER_MINUTE = NS_PER_SECOND * 60
NS_PER_HOUR = NS_PER_MINUTE * 60
NS_PER_DAY = NS_PER_HOUR * HOURS_PER_DAY
NS_PER_WEEK = NS_PER_HOUR * HOURS_PER_WEEK
NS_PER_MONTH = NS_PER_HOUR * HOURS_PER_MONTH
NS_PER_YEAR = NS_PER_HOUR * HOURS_PER_YEAR

NS_PER_MICROSECOND = 1_000

TICKS_MAX = 2**63 - 1
"""Largest tick count; conversions saturate here instead of wrapping."""
TICKS_MIN = -(2**63)
"""Smallest tick count; conversions saturate here instead of wrapping."""

DEFAULT_MAX_INPUT_LENGTH = 256
"""Maximum accepted length of a duration string (CWE-400 prevention)."""
