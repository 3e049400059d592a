"""The Duration value type."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

MAGNITUDE_FIELDS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")
"""Magnitude field names, largest unit first."""

_VALUE_FIELDS = frozenset(MAGNITUDE_FIELDS) | {"negative"}


@dataclass
class Duration:
    """An ISO 8601 duration.

    Every magnitude is non-negative; the sign of the whole value is carried
    by ``negative``. Equality is structural over the magnitudes and the sign.

    ``original_text`` holds the exact string a value was parsed from so that
    formatting an untouched parse result reproduces its input. Assigning any
    magnitude or the sign clears it.
    """

    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0
    negative: bool = False
    original_text: str | None = field(default=None, compare=False, repr=False, kw_only=True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _VALUE_FIELDS:
            if name == "negative":
                value = bool(value)
            else:
                value = float(value)
                if value < 0:
                    raise ValueError(
                        f"duration field {name!r} must be non-negative, got {value!r}"
                    )
            object.__setattr__(self, name, value)
            # Rendering falls back to the fields once they change.
            object.__setattr__(self, "original_text", None)
            return
        object.__setattr__(self, name, value)

    @classmethod
    def parse(cls, text: str, **kwargs: Any) -> Duration:
        from pyisodur._parser import parse

        return parse(text, **kwargs)

    @classmethod
    def from_ticks(cls, ticks: int) -> Duration:
        from pyisodur._converter import from_ticks

        return from_ticks(ticks)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        from pyisodur._converter import from_timedelta

        return from_timedelta(td)

    def to_ticks(self) -> int:
        """Signed nanosecond count, see :func:`pyisodur.to_ticks`."""
        from pyisodur._converter import to_ticks

        return to_ticks(self)

    def to_timedelta(self) -> timedelta:
        from pyisodur._converter import to_timedelta

        return to_timedelta(self)

    def is_zero(self) -> bool:
        return all(getattr(self, name) == 0 for name in MAGNITUDE_FIELDS)

    def __str__(self) -> str:
        from pyisodur._formatter import format

        return format(self)

    def __neg__(self) -> Duration:
        if self.is_zero():
            return replace(self, negative=False, original_text=None)
        return replace(self, negative=not self.negative, original_text=None)

    def __abs__(self) -> Duration:
        return replace(self, negative=False, original_text=None)

    @classmethod
    def _validate(cls, value: Any) -> Duration:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, timedelta):
            return cls.from_timedelta(value)
        raise ValueError(
            f"expected an ISO 8601 duration string, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls._validate, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(cls._validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, info_arg=False, when_used="always"
            ),
        )
