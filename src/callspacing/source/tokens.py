# topmark:header:start
#
#   project      : CallSpacing
#   file         : tokens.py
#   file_relpath : src/callspacing/source/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token primitives shared by the host adapter and the rule.

Tokens are immutable spans of source text. Offsets are character offsets into
the decoded source text; locations use 1-based lines and 0-based columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

TokenPredicate = Callable[["Token"], bool]


class TokenKind(str, Enum):
    """Coarse token classification."""

    PUNCTUATOR = "Punctuator"
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    TEMPLATE = "Template"
    BLOCK_COMMENT = "Block"
    LINE_COMMENT = "Line"
    SHEBANG = "Shebang"
    OTHER = "Other"

    @property
    def is_comment(self) -> bool:
        """Return True for comment-like kinds."""
        return self in (TokenKind.BLOCK_COMMENT, TokenKind.LINE_COMMENT, TokenKind.SHEBANG)


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A line/column position (1-based line, 0-based column)."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A start/end pair of positions."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """An immutable span of source text.

    Attributes:
        kind (TokenKind): Coarse classification.
        value (str): The token text.
        start (int): Offset of the first character.
        end (int): Offset one past the last character.
        loc (SourceLocation): Line/column span.
    """

    kind: TokenKind
    value: str
    start: int
    end: int
    loc: SourceLocation

    @property
    def range(self) -> tuple[int, int]:
        """Return ``(start, end)``."""
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.value!r}, {self.start}:{self.end})"


def is_opening_paren_token(token: Token) -> bool:
    """Return True if ``token`` is ``(``."""
    return token.value == "(" and token.kind is TokenKind.PUNCTUATOR


def is_question_dot_token(token: Token) -> bool:
    """Return True if ``token`` is the optional-chaining marker ``?.``."""
    return token.value == "?." and token.kind is TokenKind.PUNCTUATOR


def is_comment_token(token: Token) -> bool:
    """Return True if ``token`` is a comment."""
    return token.kind.is_comment
