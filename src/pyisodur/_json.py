"""JSON encoding of durations as single string values."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from pyisodur._duration import Duration
from pyisodur._formatter import format
from pyisodur._parser import parse


class DurationJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes a Duration as its ISO 8601 string."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return format(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """``json.dumps`` with Duration support."""
    kwargs.setdefault("cls", DurationJSONEncoder)
    return json.dumps(obj, **kwargs)


def decode(value: Any, **parse_kwargs: Any) -> Duration:
    """Decode a string field holding an ISO 8601 duration.

    Raises:
        TypeError: If value is not a string.
        ParseError: If the string is not a valid duration.
    """
    if not isinstance(value, str):
        raise TypeError(f"duration field must be a string, not {type(value).__name__}")
    return parse(value, **parse_kwargs)


def duration_hook(*keys: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build a ``json.loads`` object_hook decoding the given keys as durations.

    >>> json.loads('{"d": "PT5M"}', object_hook=duration_hook("d"))
    {'d': Duration(years=0.0, months=0.0, weeks=0.0, days=0.0, hours=0.0, minutes=5.0, seconds=0.0, negative=False)}
    """
    wanted = frozenset(keys)

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for key in wanted.intersection(obj):
            if obj[key] is not None:
                obj[key] = decode(obj[key])
        return obj

    return hook


def loads(s: str | bytes, *keys: str, **kwargs: Any) -> Any:
    """``json.loads`` decoding the values under ``keys`` as durations."""
    return json.loads(s, object_hook=duration_hook(*keys), **kwargs)
