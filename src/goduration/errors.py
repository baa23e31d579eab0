"""Errors raised while parsing duration literals."""

from enum import Enum


class ErrorKind(Enum):
    """Why a duration literal was rejected."""

    INVALID = "invalid"
    OVERFLOW = "overflow"
    MISSING_UNIT = "missing_unit"
    UNKNOWN_UNIT = "unknown_unit"


class ParseError(ValueError):
    """A duration literal could not be parsed.

    The message always quotes the original input, unmodified, so it reads the
    same no matter how far parsing got before it failed.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        text: str,
        unit: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.text = text
        self.unit = unit

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {self.message!r})"
