"""Exception hierarchy for ISO 8601 duration parsing."""

from __future__ import annotations

import enum


class ErrorKind(enum.StrEnum):
    """Classification of a parse failure."""

    UNEXPECTED_INPUT = "unexpected_input"
    NUMERIC_FORMAT = "numeric_format"
    SIGN_PLACEMENT = "sign_placement"
    INPUT_TOO_LONG = "input_too_long"


class ParseError(ValueError):
    """Base exception for duration parsing errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention). ``text`` and
    ``position`` locate the failure in the input when known.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED_INPUT

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        text: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.text = text
        self.position = position

    def internal(self) -> str:
        return self.internal_details


class GrammarError(ParseError):
    """Raised when the input does not follow the duration grammar."""

    kind = ErrorKind.UNEXPECTED_INPUT


class SignPlacementError(GrammarError):
    """Raised when a minus sign appears anywhere but the first character."""

    kind = ErrorKind.SIGN_PLACEMENT


class NumericFormatError(ParseError):
    """Raised when a field's digit run is not a valid decimal literal."""

    kind = ErrorKind.NUMERIC_FORMAT


class MaxInputLengthExceededError(ParseError):
    """Raised when the input exceeds the configured maximum length."""

    kind = ErrorKind.INPUT_TOO_LONG


# Sanitized user-facing error message constants
ERR_MSG_UNEXPECTED_INPUT = "unexpected input"
ERR_MSG_MISSING_PERIOD = "duration must start with 'P'"
ERR_MSG_DESIGNATOR_PLACEMENT = "designator not allowed here"
ERR_MSG_DUPLICATE_DESIGNATOR = "duplicate designator"
ERR_MSG_DANGLING_NUMBER = "number without designator"
ERR_MSG_SIGN_PLACEMENT = "sign must precede 'P'"
ERR_MSG_NUMERIC_FORMAT = "invalid number"
ERR_MSG_INPUT_TOO_LONG = "duration string too long"
