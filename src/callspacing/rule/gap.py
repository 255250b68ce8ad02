# topmark:header:start
#
#   project      : CallSpacing
#   file         : gap.py
#   file_relpath : src/callspacing/rule/gap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gap classification between a callee and its argument list."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from callspacing.config.logging import get_logger
from callspacing.source.code import LINEBREAK_PATTERN

if TYPE_CHECKING:
    from callspacing.config.logging import CallSpacingLogger
    from callspacing.rule.nodes import Boundaries
    from callspacing.source.code import SourceCode

logger: CallSpacingLogger = get_logger(__name__)

# Non-greedy and confined to one line: a block comment spanning lines is kept,
# so its line break still counts.
BLOCK_COMMENT_PATTERN: re.Pattern[str] = re.compile(r"/\*[^\r\n\u2028\u2029]*?\*/")

WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"[\s\ufeff]")


@dataclass(frozen=True, slots=True)
class Gap:
    """Classified text between two boundary tokens.

    Attributes:
        text (str): Raw text between the tokens (comments included).
        has_whitespace (bool): Whitespace remains once block comments are stripped.
        has_newline (bool): That whitespace includes a line terminator.
        has_comments (bool): A comment token lies inside the gap.
    """

    text: str
    has_whitespace: bool
    has_newline: bool
    has_comments: bool

    def __post_init__(self) -> None:
        if self.has_newline and not self.has_whitespace:
            raise ValueError("a gap cannot hold a line break without whitespace")


def analyze_gap(source: SourceCode, boundaries: Boundaries) -> Gap:
    """Classify the text strictly between ``boundaries.left`` and ``boundaries.right``.

    Args:
        source (SourceCode): Token store holding both tokens.
        boundaries (Boundaries): The gap delimiters.

    Returns:
        Gap: The classified gap.
    """
    left, right = boundaries.left, boundaries.right
    text: str = source.get_text(left.end, right.start)
    stripped: str = BLOCK_COMMENT_PATTERN.sub("", text)

    has_whitespace: bool = WHITESPACE_PATTERN.search(stripped) is not None
    has_newline: bool = has_whitespace and LINEBREAK_PATTERN.search(stripped) is not None

    gap = Gap(
        text=text,
        has_whitespace=has_whitespace,
        has_newline=has_newline,
        has_comments=source.comments_exist_between(left, right),
    )
    logger.trace("Gap %r between %r and %r: %s", text, left, right, gap)
    return gap
