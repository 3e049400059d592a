"""pyisodur - Parse, format and convert ISO 8601 durations."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyisodur")
except PackageNotFoundError:  # running from a source tree without install
    __version__ = "0.0.0.dev0"

from pyisodur._constants import (
    DEFAULT_MAX_INPUT_LENGTH,
    HOURS_PER_DAY,
    HOURS_PER_MONTH,
    HOURS_PER_WEEK,
    HOURS_PER_YEAR,
    NS_PER_DAY,
    NS_PER_HOUR,
    NS_PER_MINUTE,
    NS_PER_MONTH,
    NS_PER_SECOND,
    NS_PER_WEEK,
    NS_PER_YEAR,
    TICKS_MAX,
    TICKS_MIN,
)
from pyisodur._converter import from_ticks, from_timedelta, to_ticks, to_timedelta
from pyisodur._duration import Duration
from pyisodur._errors import (
    ErrorKind,
    GrammarError,
    MaxInputLengthExceededError,
    NumericFormatError,
    ParseError,
    SignPlacementError,
)
from pyisodur._formatter import format, format_ticks
from pyisodur._json import DurationJSONEncoder, decode, dumps, loads
from pyisodur._parser import parse

__all__ = [
    "parse",
    "format",
    "format_ticks",
    "to_ticks",
    "from_ticks",
    "to_timedelta",
    "from_timedelta",
    "dumps",
    "loads",
    "decode",
    "Duration",
    "DurationJSONEncoder",
    "ErrorKind",
    "ParseError",
    "GrammarError",
    "SignPlacementError",
    "NumericFormatError",
    "MaxInputLengthExceededError",
    "HOURS_PER_DAY",
    "HOURS_PER_WEEK",
    "HOURS_PER_MONTH",
    "HOURS_PER_YEAR",
    "NS_PER_SECOND",
    "NS_PER_MINUTE",
    "NS_PER_HOUR",
    "NS_PER_DAY",
    "NS_PER_WEEK",
    "NS_PER_MONTH",
    "NS_PER_YEAR",
    "TICKS_MIN",
    "TICKS_MAX",
    "DEFAULT_MAX_INPUT_LENGTH",
]
