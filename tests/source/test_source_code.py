# topmark:header:start
#
#   project      : CallSpacing
#   file         : test_source_code.py
#   file_relpath : tests/source/test_source_code.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the `SourceCode` token store."""

from __future__ import annotations

import pytest

from callspacing.source.code import SourceCode, compute_line_starts
from callspacing.source.tokens import (
    Position,
    Token,
    TokenKind,
    is_comment_token,
    is_opening_paren_token,
    is_question_dot_token,
)


def _tok(source_text: str, kind: TokenKind, start: int, end: int) -> Token:
    locator = SourceCode(source_text, ())
    return Token(kind, source_text[start:end], start, end, locator.get_loc(start, end))


@pytest.fixture
def store() -> SourceCode:
    # foo /* c */ ?. ( x )
    # 0123456789012345678901
    text = "foo /* c */ ?. ( x )"
    tokens = [
        _tok(text, TokenKind.IDENTIFIER, 0, 3),
        _tok(text, TokenKind.PUNCTUATOR, 12, 14),
        _tok(text, TokenKind.PUNCTUATOR, 15, 16),
        _tok(text, TokenKind.IDENTIFIER, 17, 18),
        _tok(text, TokenKind.PUNCTUATOR, 19, 20),
    ]
    comments = [_tok(text, TokenKind.BLOCK_COMMENT, 4, 11)]
    return SourceCode(text, tokens, comments)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", [0]),
        ("a", [0]),
        ("a\nb", [0, 2]),
        ("a\r\nb", [0, 3]),
        ("a\rb\u2028c\u2029d", [0, 2, 4, 6]),
    ],
)
def test_compute_line_starts(text: str, expected: list[int]) -> None:
    """Every ECMAScript line terminator starts a new line; CRLF counts once."""
    assert compute_line_starts(text) == expected


def test_get_position_is_one_based_line_zero_based_column() -> None:
    """Lines are 1-based and columns 0-based."""
    source = SourceCode("ab\ncd", ())
    assert source.get_position(0) == Position(1, 0)
    assert source.get_position(2) == Position(1, 2)
    assert source.get_position(3) == Position(2, 0)
    assert source.get_position(5) == Position(2, 2)


def test_get_text_slices(store: SourceCode) -> None:
    """`get_text` returns the full text or a slice."""
    assert store.get_text() == store.text
    assert store.get_text(0, 3) == "foo"


def test_token_before_skips_question_dot(store: SourceCode) -> None:
    """The skip predicate steps over matching tokens."""
    paren = store.tokens[2]
    assert store.get_token_before(paren) == store.tokens[1]
    assert store.get_token_before(paren, skip=is_question_dot_token) == store.tokens[0]


def test_token_navigation_at_file_edges(store: SourceCode) -> None:
    """Nothing precedes the first token and nothing follows the last one."""
    assert store.get_token_before(store.tokens[0]) is None
    assert store.get_token_after(store.tokens[-1]) is None


def test_token_after_ignores_comments(store: SourceCode) -> None:
    """Comments are not tokens."""
    assert store.get_token_after(store.tokens[0]) == store.tokens[1]


def test_first_and_last_token_of_range(store: SourceCode) -> None:
    """Only tokens lying entirely inside the range count."""
    assert store.get_first_token((0, 20)) == store.tokens[0]
    assert store.get_last_token((0, 20)) == store.tokens[-1]
    assert store.get_last_token((0, 19)) == store.tokens[3]
    assert store.get_first_token((4, 11)) is None


def test_first_token_between_with_predicate(store: SourceCode) -> None:
    """The search is strictly between the two tokens."""
    first, last = store.tokens[0], store.tokens[-1]
    assert store.get_first_token_between(first, last) == store.tokens[1]
    assert store.get_first_token_between(first, last, is_opening_paren_token) == store.tokens[2]
    assert store.get_first_token_between(store.tokens[2], last, is_opening_paren_token) is None


def test_comments_exist_between(store: SourceCode) -> None:
    """A comment inside the gap is found; none exists after the marker."""
    assert store.comments_exist_between(store.tokens[0], store.tokens[1])
    assert not store.comments_exist_between(store.tokens[1], store.tokens[2])


def test_token_predicates(store: SourceCode) -> None:
    """Predicates look at both value and kind."""
    assert is_opening_paren_token(store.tokens[2])
    assert not is_opening_paren_token(store.tokens[4])
    assert is_question_dot_token(store.tokens[1])
    assert is_comment_token(store.comments[0])
    assert not is_comment_token(store.tokens[0])
