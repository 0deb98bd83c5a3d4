import pytest

from chelper.ast_node import WHITESPACE_ID, ASTNode, ASTNodeId, ASTNodeMode
from chelper.error_reason import ErrorReason, ErrorReasonLevel
from chelper.ids import NormalId
from chelper.suggestion import Suggestion, Suggestions, SuggestionsType
from chelper.theme import NO_COLOR, Theme
from chelper.tokens_view import LexerResult, Token, TokensView, TokenType


class FakeNode:
    def __init__(self, description=None, brief=None, next_nodes=(), suggestion=None,
                 color=None, id_error=None, is_lf=False):
        self.description = description
        self.brief = brief
        self.next_nodes = list(next_nodes)
        self.suggestion = suggestion
        self.color = color
        self.id_error = id_error
        self.is_lf = is_lf

    def collect_description(self, ast, index):
        return self.description

    def collect_id_error(self, ast, out):
        if self.id_error is None:
            return False
        out.append(ErrorReason.id_error(ast.tokens.start_index, ast.tokens.end_index, self.id_error))
        return True

    def collect_suggestions(self, ast, index, out):
        if self.suggestion is None:
            return False
        out.append(Suggestions.single_literal(
            Suggestion.from_tokens(ast.tokens, False, NormalId.make(self.suggestion))))
        return True

    def collect_structure(self, ast, structure, is_must_have):
        if self.description is not None:
            structure.append_param(is_must_have, self.description)

    def collect_structure_with_next_nodes(self, structure, is_must_have):
        self.collect_structure(None, structure, is_must_have)

    def collect_color(self, ast, colored, theme):
        if self.color is None:
            return False
        colored.set_tokens_color(ast.tokens, self.color)
        return True


def lex(parts):
    tokens = []
    index = 0
    for token_type, content in parts:
        tokens.append(Token(token_type, index, content))
        index += len(content)
    return LexerResult("".join(c for _, c in parts), tokens)


@pytest.fixture
def give():
    return lex([(TokenType.STRING, "give"), (TokenType.WHITE_SPACE, " "),
                (TokenType.STRING, "steve")])


def test_simple_node_errors(give):
    ok = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1))
    assert not ok.is_error()
    reason = ErrorReason.incomplete(0, 4, "bad")
    bad = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1), reason)
    assert bad.error_reasons == [reason]
    assert bad.mode is ASTNodeMode.NONE


def test_and_node_takes_child_errors_or_given(give):
    reason = ErrorReason.content_error(5, 10, "child")
    first = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1))
    second = ASTNode.simple_node(FakeNode(), TokensView(give, 2, 3), reason)
    node = ASTNode.and_node(FakeNode(), [first, second], TokensView(give, 0, 3))
    assert node.error_reasons == [reason]
    own = ErrorReason.incomplete(0, 0, "own")
    node = ASTNode.and_node(FakeNode(), [first, second], TokensView(give, 0, 3), own)
    assert node.error_reasons == [own]


def test_or_node_prefers_longest_success(give):
    short = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1))
    long = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 3))
    failing = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 3),
                                  ErrorReason.incomplete(0, 1, "x"))
    node = ASTNode.or_node(FakeNode(), [short, failing, long])
    assert node.which_best == 2
    assert not node.is_error()
    assert node.tokens.text() == "give steve"


def test_or_node_keeps_latest_errors_and_dedupes(give):
    early = ErrorReason.incomplete(0, 4, "early")
    late = ErrorReason.content_error(5, 10, "late")
    a = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1), early)
    b = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 3), late)
    c = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 3),
                            ErrorReason.content_error(5, 10, "late"))
    node = ASTNode.or_node(FakeNode(), [a, b, c])
    assert node.which_best == 1
    assert node.error_reasons == [late]


def test_or_node_replaces_reason_when_given(give):
    a = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1), ErrorReason.incomplete(0, 4, "a"))
    b = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1), ErrorReason.incomplete(0, 4, "b"))
    tokens = TokensView(give, 0, 3)
    node = ASTNode.or_node(FakeNode(), [a, b], tokens, "mismatch")
    assert len(node.error_reasons) == 1
    reason = node.error_reasons[0]
    assert reason.level == ErrorReasonLevel.CONTENT_ERROR
    assert (reason.start, reason.end, reason.reason) == (0, 10, "mismatch")


def test_all_whitespace_error(give):
    ws = ErrorReason.require_whitespace(4, 4, "space")
    node = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 1), ws)
    assert node.is_all_whitespace_error()
    mixed = ASTNode.and_node(FakeNode(), [node], TokensView(give, 0, 1),
                             ErrorReason.incomplete(0, 1, "x"))
    assert not mixed.is_all_whitespace_error()


def test_description_in_and_out_of_range(give):
    child = ASTNode.simple_node(FakeNode("player"), TokensView(give, 2, 3))
    root = ASTNode.and_node(FakeNode(), [child], TokensView(give, 2, 3),
                            node_id=ASTNodeId.COMPOUND)
    assert root.get_description(7) == "player"
    assert root.get_description(1) == "未知"


def test_error_reasons_sorted_by_level(give):
    incomplete = ErrorReason.incomplete(0, 4, "inc")
    child = ASTNode.simple_node(FakeNode(id_error="unknown"), TokensView(give, 2, 3))
    root = ASTNode.and_node(FakeNode(), [child], TokensView(give, 0, 3), incomplete,
                            node_id=ASTNodeId.COMPOUND)
    reasons = root.get_error_reasons()
    assert [r.level for r in reasons] == [ErrorReasonLevel.ID_ERROR, ErrorReasonLevel.INCOMPLETE]
    assert [r.reason for r in root.get_id_errors()] == ["unknown"]


def test_id_errors_only_from_best_or_child(give):
    a = ASTNode.simple_node(FakeNode(id_error="a"), TokensView(give, 0, 1))
    b = ASTNode.simple_node(FakeNode(id_error="b"), TokensView(give, 0, 3))
    root = ASTNode.or_node(FakeNode(), [a, b], node_id=ASTNodeId.COMPOUND)
    assert [r.reason for r in root.get_id_errors()] == ["b"]


def test_structure_required_and_optional(give):
    lf = FakeNode(is_lf=True)
    first = ASTNode.simple_node(FakeNode("give"), TokensView(give, 0, 1))
    second = ASTNode.simple_node(FakeNode("target"), TokensView(give, 2, 3))
    root = ASTNode.and_node(FakeNode(), [first, second], TokensView(give, 0, 3),
                            node_id=ASTNodeId.COMPOUND)
    assert root.get_structure() == "<give> <target>"
    first_optional = ASTNode.simple_node(FakeNode("give", next_nodes=[lf]), TokensView(give, 0, 1))
    root = ASTNode.and_node(FakeNode(), [first_optional, second], TokensView(give, 0, 3),
                            node_id=ASTNodeId.COMPOUND)
    assert root.get_structure() == "<give> [target]"


def test_structure_uses_brief(give):
    node = ASTNode.simple_node(FakeNode("long", brief="short"), TokensView(give, 0, 1))
    assert node.get_structure() == "<short>"


def test_suggestions_from_nodes_and_whitespace(give):
    ws = ErrorReason.require_whitespace(4, 4, "space")
    child = ASTNode.simple_node(FakeNode(suggestion="give"), TokensView(give, 0, 1), ws)
    root = ASTNode.and_node(FakeNode(), [child], TokensView(give, 0, 1),
                            node_id=ASTNodeId.COMPOUND)
    result = root.get_suggestions(4)
    assert result[0].content is WHITESPACE_ID
    assert (result[0].start, result[0].end) == (4, 4)
    assert len(result) == 1  # child has only a whitespace error, so it is skipped

    plain = ASTNode.simple_node(FakeNode(suggestion="give"), TokensView(give, 0, 1))
    names = [s.content.name for s in plain.get_suggestions(2)]
    assert names == ["give"]
    assert plain.get_suggestions(9) == []


def test_colors_for_nodes_and_brackets():
    result = lex([(TokenType.SYMBOL, "["), (TokenType.SYMBOL, "{"), (TokenType.SYMBOL, "}"),
                  (TokenType.SYMBOL, "]"), (TokenType.SYMBOL, "}")])
    theme = Theme()
    root = ASTNode.simple_node(FakeNode(), TokensView(result, 0, 5))
    colored = root.get_colors(theme)
    assert colored.colors == [theme.color_brackets1, theme.color_brackets2,
                              theme.color_brackets2, theme.color_brackets1, NO_COLOR]


def test_colors_from_node(give):
    theme = Theme()
    child = ASTNode.simple_node(FakeNode(color=theme.color_command), TokensView(give, 0, 1))
    root = ASTNode.and_node(FakeNode(), [child], TokensView(give, 0, 3),
                            node_id=ASTNodeId.COMPOUND)
    colored = root.get_colors(theme)
    assert colored.colors[:4] == [theme.color_command] * 4
    assert colored.colors[4:] == [NO_COLOR] * 6


def test_whitespace_suggestion_type(give):
    ws = ErrorReason.require_whitespace(10, 10, "space")
    node = ASTNode.simple_node(FakeNode(), TokensView(give, 0, 3), ws)
    groups = []
    node.collect_suggestions(10, groups)
    assert groups == []
    result = node.get_suggestions(10)
    assert [s.content.name for s in result] == [" "]
    assert Suggestions.single_whitespace(result[0]).suggestions_type is SuggestionsType.WHITESPACE