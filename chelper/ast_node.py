"""The syntax tree produced by parsing a command, and the queries run on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence

from chelper.colored_string import ColoredString
from chelper.error_reason import ErrorReason, ErrorReasonLevel
from chelper.ids import NormalId
from chelper.structure_builder import StructureBuilder
from chelper.suggestion import Suggestion, Suggestions, merge_suggestions
from chelper.theme import Theme
from chelper.tokens_view import TokensView, TokenType

UNKNOWN_DESCRIPTION = "未知"

WHITESPACE_ID = NormalId.make(" ", "空格")


class ASTNodeMode(Enum):
    """How a tree node relates to its children."""

    NONE = "NONE"
    AND = "AND"
    OR = "OR"


class ASTNodeId(Enum):
    """Marks tree nodes that only group other nodes."""

    NONE = "NONE"
    COMPOUND = "COMPOUND"
    NEXT_NODE = "NEXT_NODE"


def _is_line_end(node: Any) -> bool:
    """Tell whether a grammar node marks the end of a command line."""
    return bool(getattr(node, "is_lf", False))


@dataclass
class ASTNode:
    """A parsed piece of a command.

    ``node`` is the grammar node that produced it; it is expected to offer
    ``brief``, ``description``, ``next_nodes`` and the ``collect_*`` hooks.
    """

    mode: ASTNodeMode
    node: Any
    child_nodes: list[ASTNode]
    tokens: TokensView
    error_reasons: list[ErrorReason] = field(default_factory=list)
    node_id: ASTNodeId = ASTNodeId.NONE
    which_best: int = 0

    @classmethod
    def simple_node(
        cls,
        node: Any,
        tokens: TokensView,
        error_reason: Optional[ErrorReason] = None,
        node_id: ASTNodeId = ASTNodeId.NONE,
    ) -> ASTNode:
        """A leaf with at most one error."""
        reasons = [error_reason] if error_reason is not None else []
        return cls(ASTNodeMode.NONE, node, [], tokens, reasons, node_id)

    @classmethod
    def and_node(
        cls,
        node: Any,
        child_nodes: Sequence[ASTNode],
        tokens: TokensView,
        error_reason: Optional[ErrorReason] = None,
        node_id: ASTNodeId = ASTNodeId.NONE,
    ) -> ASTNode:
        """A sequence; it carries the given error or else the first failing child's errors."""
        children = list(child_nodes)
        if error_reason is not None:
            return cls(ASTNodeMode.AND, node, children, tokens, [error_reason], node_id)
        for child in children:
            if child.is_error():
                return cls(
                    ASTNodeMode.AND, node, children, tokens, list(child.error_reasons), node_id
                )
        return cls(ASTNodeMode.AND, node, children, tokens, [], node_id)

    @classmethod
    def or_node(
        cls,
        node: Any,
        child_nodes: Sequence[ASTNode],
        tokens: Optional[TokensView] = None,
        error_reason: Optional[str] = None,
        node_id: ASTNodeId = ASTNodeId.NONE,
    ) -> ASTNode:
        """A choice between alternatives; the best one is remembered in ``which_best``.

        Without ``tokens`` the node spans the best child's tokens.  When more than
        one alternative fails and ``error_reason`` is given, it replaces the
        collected errors.
        """
        children = list(child_nodes)
        error_count = 0
        for child in children:
            if child.is_error():
                error_count += 1
            else:
                error_count = 0
                break
        reasons: list[ErrorReason] = []
        which_best = 0
        if error_count == 0:
            end = 0
            for i, child in enumerate(children):
                if child.is_error():
                    continue
                if end < child.tokens.end:
                    which_best = i
                    end = child.tokens.end
            error_count += 1
        else:
            start = 0
            for i, child in enumerate(children):
                for reason in child.error_reasons:
                    if start > reason.start:
                        continue
                    if start < reason.start:
                        start = reason.start
                        which_best = i
                        reasons.clear()
                        reasons.append(reason)
                    elif reason not in reasons:
                        reasons.append(reason)
        used_tokens = tokens if tokens is not None else children[which_best].tokens
        if error_count > 1 and error_reason is not None:
            reasons = [
                ErrorReason.for_tokens(ErrorReasonLevel.CONTENT_ERROR, used_tokens, error_reason)
            ]
        return cls(ASTNodeMode.OR, node, children, used_tokens, reasons, node_id, which_best)

    def is_error(self) -> bool:
        return bool(self.error_reasons)

    def has_child_node(self) -> bool:
        return bool(self.child_nodes)

    def is_all_whitespace_error(self) -> bool:
        """Tell whether the node fails only because white space is missing."""
        return self.is_error() and all(
            reason.level == ErrorReasonLevel.REQUIRE_WHITE_SPACE for reason in self.error_reasons
        )

    def _is_grouping(self) -> bool:
        return self.node_id in (ASTNodeId.COMPOUND, ASTNodeId.NEXT_NODE)

    def collect_description(self, index: int) -> Optional[str]:
        """Describe the element under the cursor at ``index``, if any."""
        if index < self.tokens.start_index or index > self.tokens.end_index:
            return None
        if not self._is_grouping() and not self.is_all_whitespace_error():
            description = self.node.collect_description(self, index)
            if description is not None:
                return description
        if self.mode is ASTNodeMode.AND:
            for child in self.child_nodes:
                description = child.collect_description(index)
                if description is not None:
                    return description
            return None
        if self.mode is ASTNodeMode.OR:
            return self.child_nodes[self.which_best].collect_description(index)
        return None

    def collect_id_errors(self, id_error_reasons: list[ErrorReason]) -> None:
        """Append errors about unknown ids, which parsing alone does not find."""
        if not self._is_grouping() and not self.is_all_whitespace_error():
            if self.node.collect_id_error(self, id_error_reasons):
                return
        if self.mode is ASTNodeMode.AND:
            for child in self.child_nodes:
                child.collect_id_errors(id_error_reasons)
        elif self.mode is ASTNodeMode.OR:
            self.child_nodes[self.which_best].collect_id_errors(id_error_reasons)

    def collect_suggestions(self, index: int, suggestions: list[Suggestions]) -> None:
        """Append suggestion groups for the cursor at ``index``."""
        if index < self.tokens.start_index or index > self.tokens.end_index:
            return
        if not self._is_grouping() and not self.is_all_whitespace_error():
            if self.node.collect_suggestions(self, index, suggestions):
                return
        if self.mode is not ASTNodeMode.NONE:
            for child in self.child_nodes:
                child.collect_suggestions(index, suggestions)

    def collect_structure(self, structure: StructureBuilder, is_must_have: bool) -> None:
        """Write the structure of this node into ``structure``."""
        is_compound = self.node_id is ASTNodeId.COMPOUND
        is_next = self.node_id is ASTNodeId.NEXT_NODE
        if not is_compound and not is_next:
            brief = getattr(self.node, "brief", None)
            if brief is not None:
                structure.append_param(is_must_have, brief)
                return
            target = (
                None
                if self.mode is ASTNodeMode.NONE and self.is_all_whitespace_error()
                else self
            )
            self.node.collect_structure(target, structure, is_must_have)
            if structure.is_dirty:
                structure.is_dirty = False
                return
        if self.mode is ASTNodeMode.NONE:
            self.node.collect_structure_with_next_nodes(structure, is_must_have)
            return
        if self.mode is ASTNodeMode.AND:
            for child in self.child_nodes:
                child.collect_structure(structure, is_must_have)
                if is_must_have and any(_is_line_end(n) for n in child.node.next_nodes):
                    is_must_have = False
        else:
            next_nodes = self.node.next_nodes
            if (
                is_next
                and len(next_nodes) != 1
                and _is_line_end(self.child_nodes[self.which_best].node)
            ):
                for item in next_nodes:
                    if not _is_line_end(item):
                        item.collect_structure_with_next_nodes(structure, is_must_have)
                        break
                return
            self.child_nodes[self.which_best].collect_structure(structure, is_must_have)
        if is_compound and len(self.child_nodes) <= 1 and self.node.next_nodes:
            self.node.next_nodes[0].collect_structure_with_next_nodes(structure, is_must_have)

    def collect_color(self, colored_string: ColoredString, theme: Theme) -> None:
        """Colour the text this node covers."""
        if not self._is_grouping():
            if self.node.collect_color(self, colored_string, theme):
                return
        if self.mode is ASTNodeMode.AND:
            for child in self.child_nodes:
                child.collect_color(colored_string, theme)
        elif self.mode is ASTNodeMode.OR:
            self.child_nodes[self.which_best].collect_color(colored_string, theme)

    def get_description(self, index: int) -> str:
        description = self.collect_description(index)
        return description if description is not None else UNKNOWN_DESCRIPTION

    def get_id_errors(self) -> list[ErrorReason]:
        """Id errors only, most severe first."""
        reasons: list[ErrorReason] = []
        self.collect_id_errors(reasons)
        return _sort_by_level(reasons)

    def get_error_reasons(self) -> list[ErrorReason]:
        """Structural and id errors, most severe first."""
        reasons = list(self.error_reasons)
        self.collect_id_errors(reasons)
        return _sort_by_level(reasons)

    def get_suggestions(self, index: int) -> list[Suggestion]:
        """Deduplicated suggestions for the cursor at ``index``."""
        length = len(self.tokens.text())
        suggestions: list[Suggestions] = []
        if _can_add_whitespace(self, index):
            suggestions.append(
                Suggestions.single_whitespace(Suggestion(length, length, False, WHITESPACE_ID))
            )
        self.collect_suggestions(index, suggestions)
        return merge_suggestions(suggestions)

    def get_structure(self) -> str:
        builder = StructureBuilder()
        self.collect_structure(builder, True)
        return builder.build().rstrip("\n")

    def get_colors(self, theme: Theme) -> ColoredString:
        """Colour the whole text, with matching brackets coloured by depth."""
        colored = ColoredString(self.tokens.lexer_result.content)
        self.collect_color(colored, theme)
        bracket_colors = (theme.color_brackets1, theme.color_brackets2, theme.color_brackets3)
        pairs = {"]": "[", "}": "{"}
        brackets: list[str] = []
        for token in self.tokens:
            if token.type is not TokenType.SYMBOL or not token.content:
                continue
            ch = token.content[0]
            if ch in "[{":
                colored.set_color(token.index, bracket_colors[len(brackets) % 3])
                brackets.append(ch)
            elif ch in pairs:
                if not brackets or brackets[-1] != pairs[ch]:
                    continue
                colored.set_color(token.index, bracket_colors[(len(brackets) - 1) % 3])
                brackets.pop()
        return colored


def _sort_by_level(reasons: list[ErrorReason]) -> list[ErrorReason]:
    return sorted(reasons, key=lambda reason: reason.level, reverse=True)


def _can_add_whitespace(ast_node: ASTNode, index: int) -> bool:
    if any(
        reason.level == ErrorReasonLevel.REQUIRE_WHITE_SPACE
        and reason.start >= index
        and reason.end <= index
        for reason in ast_node.error_reasons
    ):
        return True
    if ast_node.mode is ASTNodeMode.AND:
        return bool(ast_node.child_nodes) and _can_add_whitespace(ast_node.child_nodes[-1], index)
    if ast_node.mode is ASTNodeMode.OR:
        return any(_can_add_whitespace(child, index) for child in ast_node.child_nodes)
    return False