# topmark:header:start
#
#   project      : CallSpacing
#   file         : code.py
#   file_relpath : src/callspacing/source/code.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only token store over one source text.

`SourceCode` answers the positional queries the rule needs: neighbouring
tokens (optionally skipping some), the first/last token of a range, the first
token between two tokens matching a predicate, and whether comments sit
between two tokens. Tokens and comments are kept in two sorted lists, so
every lookup is a binary search.
"""

from __future__ import annotations

import re
from bisect import bisect_left, bisect_right
from typing import TYPE_CHECKING

from callspacing.source.tokens import Position, SourceLocation

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from callspacing.source.tokens import Token, TokenPredicate

# Line terminators recognized by ECMAScript.
LINEBREAK_PATTERN: re.Pattern[str] = re.compile(r"\r\n|[\r\n\u2028\u2029]")


def compute_line_starts(text: str) -> list[int]:
    """Return the offset at which each line of ``text`` starts."""
    starts: list[int] = [0]
    starts.extend(m.end() for m in LINEBREAK_PATTERN.finditer(text))
    return starts


class SourceCode:
    """Positional queries over a tokenized source text.

    Args:
        text (str): The full source text.
        tokens (Iterable[Token]): Non-comment tokens.
        comments (Iterable[Token]): Comment tokens.
    """

    def __init__(self, text: str, tokens: Iterable[Token], comments: Iterable[Token] = ()) -> None:
        self.text: str = text
        self.tokens: tuple[Token, ...] = tuple(sorted(tokens, key=lambda t: t.range))
        self.comments: tuple[Token, ...] = tuple(sorted(comments, key=lambda t: t.range))
        self.line_starts: list[int] = compute_line_starts(text)
        self._token_starts: list[int] = [t.start for t in self.tokens]
        self._token_ends: list[int] = [t.end for t in self.tokens]
        self._comment_starts: list[int] = [c.start for c in self.comments]

    def __repr__(self) -> str:
        return f"SourceCode(tokens={len(self.tokens)}, comments={len(self.comments)})"

    # --- text and locations ---

    def get_text(self, start: int | None = None, end: int | None = None) -> str:
        """Return the source text, or the slice ``[start:end]``."""
        if start is None and end is None:
            return self.text
        return self.text[start:end]

    def get_position(self, offset: int) -> Position:
        """Return the line/column position of character ``offset``."""
        line_index: int = bisect_right(self.line_starts, offset) - 1
        return Position(line=line_index + 1, column=offset - self.line_starts[line_index])

    def get_loc(self, start: int, end: int) -> SourceLocation:
        """Return the location spanning ``[start, end)``."""
        return SourceLocation(start=self.get_position(start), end=self.get_position(end))

    # --- token navigation ---

    def get_token_before(self, token: Token, skip: TokenPredicate | None = None) -> Token | None:
        """Return the token preceding ``token``.

        Args:
            token (Token): Reference token (or comment).
            skip (TokenPredicate | None): Tokens for which this returns True are skipped.

        Returns:
            Token | None: The preceding token, or ``None`` at the start of the file.
        """
        index: int = bisect_right(self._token_ends, token.start) - 1
        while index >= 0:
            candidate: Token = self.tokens[index]
            if skip is None or not skip(candidate):
                return candidate
            index -= 1
        return None

    def get_token_after(self, token: Token, skip: TokenPredicate | None = None) -> Token | None:
        """Return the token following ``token``.

        Args:
            token (Token): Reference token (or comment).
            skip (TokenPredicate | None): Tokens for which this returns True are skipped.

        Returns:
            Token | None: The following token, or ``None`` at the end of the file.
        """
        index: int = bisect_left(self._token_starts, token.end)
        while index < len(self.tokens):
            candidate: Token = self.tokens[index]
            if skip is None or not skip(candidate):
                return candidate
            index += 1
        return None

    def get_tokens_in_range(self, start: int, end: int) -> Sequence[Token]:
        """Return the tokens lying entirely inside ``[start, end)``."""
        lo: int = bisect_left(self._token_starts, start)
        hi: int = bisect_right(self._token_ends, end)
        return self.tokens[lo:hi] if lo < hi else ()

    def get_first_token(self, node_range: tuple[int, int]) -> Token | None:
        """Return the first token inside ``node_range``."""
        tokens = self.get_tokens_in_range(*node_range)
        return tokens[0] if tokens else None

    def get_last_token(self, node_range: tuple[int, int]) -> Token | None:
        """Return the last token inside ``node_range``."""
        tokens = self.get_tokens_in_range(*node_range)
        return tokens[-1] if tokens else None

    def get_first_token_between(
        self, left: Token, right: Token, predicate: TokenPredicate | None = None
    ) -> Token | None:
        """Return the first token strictly between ``left`` and ``right`` matching ``predicate``."""
        for token in self.get_tokens_in_range(left.end, right.start):
            if predicate is None or predicate(token):
                return token
        return None

    def comments_exist_between(self, left: Token, right: Token) -> bool:
        """Return True if any comment lies within ``[left.end, right.start)``."""
        index: int = bisect_left(self._comment_starts, left.end)
        return index < len(self.comments) and self.comments[index].end <= right.start
