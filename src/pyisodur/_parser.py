"""ISO 8601 duration parser.

A single pass over the input with two states: the period part (after ``P``)
and the time part (after ``T``). The state decides what a designator means,
which is how ``M`` resolves to months or minutes.
"""

from __future__ import annotations

import enum
import logging

from pyisodur._constants import DEFAULT_MAX_INPUT_LENGTH
from pyisodur._duration import Duration
from pyisodur._errors import (
    ERR_MSG_DANGLING_NUMBER,
    ERR_MSG_DESIGNATOR_PLACEMENT,
    ERR_MSG_DUPLICATE_DESIGNATOR,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_MISSING_PERIOD,
    ERR_MSG_NUMERIC_FORMAT,
    ERR_MSG_SIGN_PLACEMENT,
    ERR_MSG_UNEXPECTED_INPUT,
    GrammarError,
    MaxInputLengthExceededError,
    NumericFormatError,
    ParseError,
    SignPlacementError,
)

logger = logging.getLogger(__name__)

NUMBER_CHARS = frozenset("0123456789.")


class _State(enum.Enum):
    IN_PERIOD = "period"
    IN_TIME = "time"


# Designator -> Duration field, per state
PERIOD_DESIGNATORS: dict[str, str] = {
    "Y": "years",
    "M": "months",
    "W": "weeks",
    "D": "days",
}

TIME_DESIGNATORS: dict[str, str] = {
    "H": "hours",
    "M": "minutes",
    "S": "seconds",
}

_DESIGNATORS = {
    _State.IN_PERIOD: PERIOD_DESIGNATORS,
    _State.IN_TIME: TIME_DESIGNATORS,
}

DESIGNATOR_CHARS = frozenset(PERIOD_DESIGNATORS) | frozenset(TIME_DESIGNATORS)


def parse(
    text: str,
    *,
    strict: bool = True,
    max_length: int | None = None,
) -> Duration:
    """Parse an ISO 8601 duration string into a Duration.

    Args:
        text: The duration string, e.g. ``P3Y6M4DT12H30M5.5S`` or ``-PT5M``.
        strict: If True, reject a designator that appears twice. If False,
            the later value overwrites the earlier one.
        max_length: Maximum accepted input length. Defaults to 256.

    Returns:
        The parsed Duration, remembering ``text`` for verbatim formatting.

    Raises:
        GrammarError: If the input does not follow the duration grammar.
        SignPlacementError: If a minus sign is not the first character.
        NumericFormatError: If a number is empty or malformed.
        MaxInputLengthExceededError: If the input is longer than max_length.
        TypeError: If text is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"duration must be a string, not {type(text).__name__}")

    if max_length is None:
        max_length = DEFAULT_MAX_INPUT_LENGTH

    try:
        return _parse(text, strict=strict, max_length=max_length)
    except ParseError as e:
        logger.debug("rejected duration %r: %s", text, e.internal())
        raise


def _parse(text: str, *, strict: bool, max_length: int) -> Duration:
    if len(text) > max_length:
        raise MaxInputLengthExceededError(
            ERR_MSG_INPUT_TOO_LONG,
            f"input length {len(text)} exceeds limit {max_length}",
            text=text,
        )

    negative = False
    pos = 0
    if text.startswith("-"):
        negative = True
        pos = 1

    if text[pos:pos + 1] == "-":
        raise _sign_error(text, pos)
    if text[pos:pos + 1] != "P":
        raise GrammarError(
            ERR_MSG_MISSING_PERIOD,
            f"expected 'P' at position {pos} in {text!r}",
            text=text,
            position=pos,
        )

    duration = Duration(negative=negative)
    seen: set[str] = set()
    state = _State.IN_PERIOD
    num_start = pos + 1
    num = ""

    for i in range(pos + 1, len(text)):
        char = text[i]

        if char in NUMBER_CHARS:
            if not num:
                num_start = i
            num += char
            continue

        if char == "T":
            if num:
                raise _dangling_error(text, num, num_start)
            state = _State.IN_TIME
            continue

        if char == "-":
            raise _sign_error(text, i)

        if char not in DESIGNATOR_CHARS:
            raise GrammarError(
                ERR_MSG_UNEXPECTED_INPUT,
                f"unexpected character {char!r} at position {i} in {text!r}",
                text=text,
                position=i,
            )

        name = _DESIGNATORS[state].get(char)
        if name is None:
            raise GrammarError(
                ERR_MSG_DESIGNATOR_PLACEMENT,
                f"designator {char!r} not allowed in {state.value} part "
                f"at position {i} in {text!r}",
                text=text,
                position=i,
            )
        if strict and name in seen:
            raise GrammarError(
                ERR_MSG_DUPLICATE_DESIGNATOR,
                f"designator {char!r} for {name} repeated at position {i} in {text!r}",
                text=text,
                position=i,
            )

        setattr(duration, name, _to_number(num, text, num_start, i))
        seen.add(name)
        num = ""

    if num:
        raise _dangling_error(text, num, num_start)

    duration.original_text = text
    return duration


def _to_number(num: str, text: str, start: int, designator_pos: int) -> float:
    """Convert a digit run to a float."""
    if not num:
        raise NumericFormatError(
            ERR_MSG_NUMERIC_FORMAT,
            f"missing number before designator at position {designator_pos} in {text!r}",
            text=text,
            position=designator_pos,
        )
    try:
        return float(num)
    except ValueError as e:
        raise NumericFormatError(
            ERR_MSG_NUMERIC_FORMAT,
            f"cannot parse number {num!r} at position {start} in {text!r}",
            wrapped=e,
            text=text,
            position=start,
        ) from e


def _sign_error(text: str, pos: int) -> SignPlacementError:
    return SignPlacementError(
        ERR_MSG_SIGN_PLACEMENT,
        f"unexpected '-' at position {pos} in {text!r}",
        text=text,
        position=pos,
    )


def _dangling_error(text: str, num: str, pos: int) -> GrammarError:
    return GrammarError(
        ERR_MSG_DANGLING_NUMBER,
        f"number {num!r} at position {pos} has no designator in {text!r}",
        text=text,
        position=pos,
    )
