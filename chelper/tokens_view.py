"""A view over a contiguous run of lexer tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class TokenType(Enum):
    """Kinds of tokens the lexer produces."""

    WHITE_SPACE = "white_space"
    STRING = "string"
    NUMBER = "number"
    SYMBOL = "symbol"
    LF = "lf"


@dataclass(frozen=True)
class Token:
    """A token starting at ``index`` in the source text."""

    type: TokenType
    index: int
    content: str

    @property
    def start_index(self) -> int:
        return self.index

    @property
    def end_index(self) -> int:
        return self.index + len(self.content)


@dataclass
class LexerResult:
    """The source text and every token read from it."""

    content: str
    all_tokens: list[Token] = field(default_factory=list)


class TokensView:
    """Tokens ``[start, end)`` of a lexer result, with their text range cached."""

    def __init__(self, lexer_result: LexerResult, start: int, end: int) -> None:
        if start > end:
            raise ValueError(f"TokensView: wrong range: ({start}, {end})")
        self.lexer_result = lexer_result
        self.start = start
        self.end = end
        self.start_index = self.get_index(start)
        self.end_index = self.get_index(end)
        self._text = lexer_result.content[self.start_index:self.end_index]

    def is_empty(self) -> bool:
        return self.start >= self.end

    def has_value(self) -> bool:
        return self.start < self.end

    def size(self) -> int:
        return self.end - self.start

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, which: int) -> Token:
        if not 0 <= which < self.size():
            raise IndexError(f"token index out of range: {which}")
        return self.lexer_result.all_tokens[self.start + which]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.lexer_result.all_tokens[self.start:self.end])

    def is_all_whitespace(self) -> bool:
        """Tell whether every token in the view is white space."""
        return all(token.type is TokenType.WHITE_SPACE for token in self)

    def get_index(self, token_index: int) -> int:
        """Return the text position where token ``token_index`` starts."""
        tokens = self.lexer_result.all_tokens
        if token_index == 0:
            return 0
        if token_index == len(tokens):
            return tokens[token_index - 1].end_index
        return tokens[token_index].start_index

    def text(self) -> str:
        """Return the source text covered by the view."""
        return self._text

    def __str__(self) -> str:
        return self._text