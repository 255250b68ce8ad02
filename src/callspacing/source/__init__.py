# topmark:header:start
#
#   project      : CallSpacing
#   file         : __init__.py
#   file_relpath : src/callspacing/source/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source text, tokens and positional queries.

The tree-sitter host adapter lives in `callspacing.source.javascript` and is
imported explicitly, as it depends on the rule's node types.
"""

from __future__ import annotations

from callspacing.source.code import LINEBREAK_PATTERN, SourceCode, compute_line_starts
from callspacing.source.tokens import (
    Position,
    SourceLocation,
    Token,
    TokenKind,
    TokenPredicate,
    is_comment_token,
    is_opening_paren_token,
    is_question_dot_token,
)

__all__ = [
    "LINEBREAK_PATTERN",
    "Position",
    "SourceCode",
    "SourceLocation",
    "Token",
    "TokenKind",
    "TokenPredicate",
    "compute_line_starts",
    "is_comment_token",
    "is_opening_paren_token",
    "is_question_dot_token",
]
