"""Completion suggestions and their grouping, deduplication and ordering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable, Optional

from chelper.ids import NormalId
from chelper.tokens_view import TokensView

_MASK = (1 << 64) - 1


@dataclass
class Suggestion:
    """Replace text ``[start, end)`` with ``content.name``."""

    start: int
    end: int
    is_add_whitespace: bool
    content: NormalId

    @classmethod
    def from_tokens(
        cls, tokens: TokensView, is_add_whitespace: bool, content: NormalId
    ) -> Suggestion:
        """Create a suggestion replacing the text covered by ``tokens``."""
        return cls(tokens.start_index, tokens.end_index, is_add_whitespace, content)

    def hash_code(self) -> int:
        return (31 * 31 * self.content.hash_code() + 31 * self.start + self.end) & _MASK

    def equal(self, other: Suggestion) -> bool:
        """Tell whether both suggestions replace the same range with the same text."""
        return (
            self.start == other.start
            and self.end == other.end
            and self.content.name == other.content.name
        )

    def apply(self, core: Any, before: str) -> tuple[str, int]:
        """Apply to ``before``; return the new text and the new cursor position.

        When the suggestion reaches the end of the text, ``core`` reparses the
        result and a trailing space is added if only white space is missing.
        """
        name = self.content.name
        if name == " " and (self.start == 0 or before[self.start - 1] == " "):
            return before, self.start
        text = before[:self.start] + name + before[self.end:]
        cursor = self.start + len(name)
        if self.end != len(before):
            return text, cursor
        core.on_text_changed(text, cursor)
        if self.is_add_whitespace and core.ast_node.is_all_whitespace_error():
            text += " "
            cursor += 1
        return text, cursor


class SuggestionsType(IntEnum):
    """Groups of suggestions, in the order they are shown."""

    WHITESPACE = 0
    SYMBOL = 1
    LITERAL = 2
    ID = 3


@dataclass
class Suggestions:
    """A group of suggestions of one type."""

    suggestions_type: SuggestionsType
    suggestions: list[Suggestion] = field(default_factory=list)
    _hash: Optional[int] = field(default=None, init=False, repr=False, compare=False)

    def is_filtered(self) -> bool:
        return self._hash is not None

    def hash_code(self) -> int:
        return self._hash if self._hash is not None else 0

    def mark_filtered(self) -> None:
        """Freeze the group's hash without deduplicating."""
        if self.is_filtered():
            return
        value = 0
        for item in self.suggestions:
            value = (31 * value + item.hash_code()) & _MASK
        self._hash = value

    def filter(self) -> None:
        """Drop duplicate suggestions, keeping the first of each, then freeze the hash."""
        if self.is_filtered():
            return
        kept: list[Suggestion] = []
        for item in self.suggestions:
            if not any(other.equal(item) for other in kept):
                kept.append(item)
        self.suggestions = kept
        self.mark_filtered()

    @classmethod
    def single(cls, suggestions_type: SuggestionsType, suggestion: Suggestion) -> Suggestions:
        result = cls(suggestions_type, [suggestion])
        result.mark_filtered()
        return result

    @classmethod
    def single_whitespace(cls, suggestion: Suggestion) -> Suggestions:
        return cls.single(SuggestionsType.WHITESPACE, suggestion)

    @classmethod
    def single_symbol(cls, suggestion: Suggestion) -> Suggestions:
        return cls.single(SuggestionsType.SYMBOL, suggestion)

    @classmethod
    def single_literal(cls, suggestion: Suggestion) -> Suggestions:
        return cls.single(SuggestionsType.LITERAL, suggestion)


def merge_suggestions(suggestions: Iterable[Suggestions]) -> list[Suggestion]:
    """Deduplicate groups and flatten them, ordered by group type."""
    groups: list[Suggestions] = []
    for item in suggestions:
        item.filter()
        if all(item.hash_code() != other.hash_code() for other in groups):
            groups.append(item)
    result: list[Suggestion] = []
    for suggestions_type in SuggestionsType:
        for group in groups:
            if group.suggestions_type == suggestions_type:
                result.extend(group.suggestions)
    return result