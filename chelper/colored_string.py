"""A string paired with one colour per character."""

from __future__ import annotations

from typing import Any

from chelper.theme import NO_COLOR


class ColoredString:
    """Holds ``text`` and a parallel list of ARGB colours."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.colors = [NO_COLOR] * len(text)

    def set_color(self, index: int, color: int) -> None:
        """Colour one character."""
        if not 0 <= index < len(self.colors):
            raise IndexError(f"index out of range: {index}")
        self.colors[index] = color

    def set_range_color(self, start: int, end: int, color: int) -> None:
        """Colour characters in ``[start, end)``."""
        if start > len(self.text) or end > len(self.text) or start < 0:
            raise IndexError(f"index out of range: ({start}, {end})")
        if start > end:
            raise ValueError("start should less than end")
        self.colors[start:end] = [color] * (end - start)

    def set_tokens_color(self, tokens: Any, color: int) -> None:
        """Colour the characters covered by a tokens view."""
        self.set_range_color(tokens.start_index, tokens.end_index, color)