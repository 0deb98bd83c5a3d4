"""Builds the one-line structure summary of a command."""

from __future__ import annotations

UNKNOWN = "未知"


class StructureBuilder:
    """Accumulates a structure string; ``is_dirty`` marks that something was written."""

    def __init__(self) -> None:
        self.structure = ""
        self.is_dirty = False

    def append_unknown(self, is_must_have: bool) -> StructureBuilder:
        return self.append_param(is_must_have, UNKNOWN)

    def append_symbol(self, ch: str) -> StructureBuilder:
        self.structure += ch
        self.is_dirty = True
        return self

    def append(self, text: str) -> StructureBuilder:
        self.structure += text
        self.is_dirty = True
        return self

    def append_white_space(self) -> StructureBuilder:
        """Add a space separator, except at the very start."""
        if not self.structure:
            self.is_dirty = True
            return self
        return self.append_symbol(" ")

    def append_left_bracket(self, is_must_have: bool) -> StructureBuilder:
        return self.append_symbol("<" if is_must_have else "[")

    def append_right_bracket(self, is_must_have: bool) -> StructureBuilder:
        return self.append_symbol(">" if is_must_have else "]")

    def append_param(self, is_must_have: bool, text: str) -> StructureBuilder:
        """Add a bracketed parameter: ``<text>`` if required, ``[text]`` otherwise."""
        return (
            self.append_white_space()
            .append_left_bracket(is_must_have)
            .append(text)
            .append_right_bracket(is_must_have)
        )

    def build(self) -> str:
        """Return the built structure and reset the builder's text."""
        result = self.structure
        self.structure = ""
        return result