"""Reasons why a piece of a command is wrong."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ErrorReasonLevel(IntEnum):
    """Severity of an error; higher values are reported first."""

    REQUIRE_WHITE_SPACE = 0
    INCOMPLETE = 1
    CONTENT_ERROR = 2
    ID_ERROR = 3


@dataclass(eq=False)
class ErrorReason:
    """An error covering the text range ``[start, end)``."""

    level: ErrorReasonLevel
    start: int
    end: int
    reason: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorReason):
            return NotImplemented
        return (
            self.start == other.start
            and self.end == other.end
            and self.reason == other.reason
        )

    def __hash__(self) -> int:
        return hash((self.start, self.end, self.reason))

    @classmethod
    def incomplete(cls, start: int, end: int, reason: str) -> ErrorReason:
        return cls(ErrorReasonLevel.INCOMPLETE, start, end, reason)

    @classmethod
    def content_error(cls, start: int, end: int, reason: str) -> ErrorReason:
        return cls(ErrorReasonLevel.CONTENT_ERROR, start, end, reason)

    @classmethod
    def id_error(cls, start: int, end: int, reason: str) -> ErrorReason:
        return cls(ErrorReasonLevel.ID_ERROR, start, end, reason)

    @classmethod
    def require_whitespace(cls, start: int, end: int, reason: str) -> ErrorReason:
        return cls(ErrorReasonLevel.REQUIRE_WHITE_SPACE, start, end, reason)

    @classmethod
    def for_tokens(cls, level: ErrorReasonLevel, tokens: Any, reason: str) -> ErrorReason:
        """Build an error spanning the text covered by a tokens view."""
        return cls(level, tokens.start_index, tokens.end_index, reason)