# topmark:header:start
#
#   project      : CallSpacing
#   file         : test_javascript_parser.py
#   file_relpath : tests/source/test_javascript_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the tree-sitter JavaScript host adapter."""

from __future__ import annotations

import pytest

from callspacing.rule.nodes import CallNode, ConstructNode, DynamicImportNode, NodeKind
from callspacing.source.javascript import JavaScriptParseError, parse_javascript
from callspacing.source.tokens import TokenKind


def test_call_expression_becomes_call_node() -> None:
    """A plain call yields one `CallNode` with the callee's range."""
    parsed = parse_javascript("foo(a, b);")
    assert len(parsed.nodes) == 1
    node = parsed.nodes[0]
    assert isinstance(node, CallNode)
    assert node.kind is NodeKind.CALL
    assert node.callee_range == (0, 3)
    assert node.range == (0, 9)
    assert node.optional is False


def test_tokens_are_leaves_in_source_order() -> None:
    """Leaves become tokens with their text and offsets."""
    parsed = parse_javascript("foo();")
    assert [t.value for t in parsed.source.tokens] == ["foo", "(", ")", ";"]
    assert parsed.source.tokens[0].kind is TokenKind.IDENTIFIER
    assert parsed.source.tokens[1].kind is TokenKind.PUNCTUATOR


def test_optional_call_is_flagged() -> None:
    """`foo?.()` is an optional call and its marker is a punctuator token."""
    parsed = parse_javascript("foo?.();")
    (node,) = parsed.nodes
    assert isinstance(node, CallNode)
    assert node.optional is True
    assert any(t.value == "?." and t.kind is TokenKind.PUNCTUATOR for t in parsed.source.tokens)


def test_optional_member_call_is_not_an_optional_call() -> None:
    """In `a?.b()` the chain is on the member, not on the call."""
    parsed = parse_javascript("a?.b();")
    (node,) = parsed.nodes
    assert isinstance(node, CallNode)
    assert node.optional is False


def test_new_expression_with_and_without_arguments() -> None:
    """Both forms are constructor nodes; only the bare one has no boundaries."""
    parsed = parse_javascript("new Foo;\nnew Bar();")
    kinds = [type(n) for n in parsed.nodes]
    assert kinds == [ConstructNode, ConstructNode]
    bare, called = parsed.nodes
    assert bare.resolve_boundaries(parsed.source) is None
    boundaries = called.resolve_boundaries(parsed.source)
    assert boundaries is not None
    assert (boundaries.left.value, boundaries.right.value) == ("Bar", "(")


def test_dynamic_import_becomes_import_node() -> None:
    """`import(...)` is a dynamic import, bounded by the keyword and the paren."""
    parsed = parse_javascript("import('./mod.js');")
    (node,) = parsed.nodes
    assert isinstance(node, DynamicImportNode)
    boundaries = node.resolve_boundaries(parsed.source)
    assert boundaries is not None
    assert boundaries.left.value == "import"
    assert boundaries.left.kind is TokenKind.KEYWORD


def test_tagged_template_is_not_a_call() -> None:
    """Tagged templates take no parens and are not reported."""
    parsed = parse_javascript("tag`hello`;")
    assert parsed.nodes == ()


def test_nested_calls_are_sorted_by_position() -> None:
    """Outer nodes come before the nodes they contain."""
    parsed = parse_javascript("a(b());")
    assert [n.range for n in parsed.nodes] == [(0, 6), (2, 5)]


def test_comments_are_kept_apart_from_tokens() -> None:
    """Comments are collected separately and classified."""
    parsed = parse_javascript("foo /* a */ (); // b\n")
    assert [c.value for c in parsed.source.comments] == ["/* a */", "// b"]
    assert [c.kind for c in parsed.source.comments] == [
        TokenKind.BLOCK_COMMENT,
        TokenKind.LINE_COMMENT,
    ]
    assert all(not t.kind.is_comment for t in parsed.source.tokens)


def test_shebang_is_a_comment() -> None:
    """A hashbang line is treated like a comment."""
    parsed = parse_javascript("#!/usr/bin/env node\nfoo();\n")
    assert parsed.source.comments[0].kind is TokenKind.SHEBANG


def test_offsets_are_characters_not_bytes() -> None:
    """Multi-byte characters before a token do not shift its offsets."""
    text = 'const s = "héllo wörld";\nfoo ();\n'
    parsed = parse_javascript(text)
    foo = next(t for t in parsed.source.tokens if t.value == "foo")
    assert foo.start == text.index("foo")
    assert text[foo.start : foo.end] == "foo"
    assert (foo.loc.start.line, foo.loc.start.column) == (2, 0)


@pytest.mark.parametrize("text", ["foo(", "foo(;", "new ;", "}"])
def test_syntax_errors_raise(text: str) -> None:
    """Malformed sources are rejected with a location."""
    with pytest.raises(JavaScriptParseError) as excinfo:
        parse_javascript(text)
    assert excinfo.value.position is not None
    assert excinfo.value.position.line == 1
    assert "Parsing error" in str(excinfo.value)


def test_empty_text_parses() -> None:
    """An empty file has no tokens and no nodes."""
    parsed = parse_javascript("")
    assert parsed.source.tokens == ()
    assert parsed.nodes == ()
