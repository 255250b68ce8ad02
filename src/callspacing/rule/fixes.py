# topmark:header:start
#
#   project      : CallSpacing
#   file         : fixes.py
#   file_relpath : src/callspacing/rule/fixes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text edits and fix synthesis.

An edit is a description, never applied here. Each violation kind has one
candidate edit which is withheld (``None``) whenever it cannot be applied
safely:

* no edit is offered when comments sit inside the gap;
* a line break is not silently removed from a plain call (removing it may
  change how neighbouring code is parsed);
* with ``?.`` it is ambiguous on which side of the marker a missing space
  belongs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from callspacing.config.logging import get_logger
from callspacing.rule.decision import MessageKind

if TYPE_CHECKING:
    from callspacing.config.logging import CallSpacingLogger
    from callspacing.rule.gap import Gap
    from callspacing.rule.nodes import Boundaries, CallLikeNode
    from callspacing.source.code import SourceCode
    from callspacing.source.tokens import Token

logger: CallSpacingLogger = get_logger(__name__)

QUESTION_DOT: str = "?."


class EditKind(str, Enum):
    """The shape of a text edit."""

    INSERT_BEFORE = "insert_before"
    REMOVE = "remove"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace the text in ``[start, end)`` with ``text``."""

    kind: EditKind
    start: int
    end: int
    text: str = ""

    @property
    def range(self) -> tuple[int, int]:
        """Return ``(start, end)``."""
        return (self.start, self.end)

    def apply(self, source_text: str) -> str:
        """Return ``source_text`` with this edit applied."""
        return source_text[: self.start] + self.text + source_text[self.end :]


def insert_text_before(token: Token, text: str) -> TextEdit:
    """Insert ``text`` right before ``token``."""
    return TextEdit(EditKind.INSERT_BEFORE, token.start, token.start, text)


def remove_range(start: int, end: int) -> TextEdit:
    """Remove the text in ``[start, end)``."""
    return TextEdit(EditKind.REMOVE, start, end)


def replace_text_range(start: int, end: int, text: str) -> TextEdit:
    """Replace the text in ``[start, end)`` with ``text``."""
    return TextEdit(EditKind.REPLACE, start, end, text)


def _fix_unexpected_whitespace(
    node: CallLikeNode, boundaries: Boundaries, gap: Gap
) -> TextEdit | None:
    if gap.has_comments:
        return None
    start, end = boundaries.left.end, boundaries.right.start
    # With `?.` the line break can go as well.
    if node.optional:
        return replace_text_range(start, end, QUESTION_DOT)
    if gap.has_newline:
        return None
    return remove_range(start, end)


def _fix_missing(node: CallLikeNode, boundaries: Boundaries, gap: Gap) -> TextEdit | None:
    if node.optional or gap.has_comments:
        return None
    return insert_text_before(boundaries.right, " ")


def _fix_unexpected_newline(
    node: CallLikeNode, boundaries: Boundaries, gap: Gap, source: SourceCode
) -> TextEdit | None:
    if not node.optional or gap.has_comments:
        return None

    left, right = boundaries.left, boundaries.right
    marker = source.get_token_after(left)
    if marker is None:
        return None

    if marker.start == left.end:
        text = f"{QUESTION_DOT} "
    elif marker.end == right.start:
        text = f" {QUESTION_DOT}"
    else:
        text = f" {QUESTION_DOT} "
    return replace_text_range(left.end, right.start, text)


def synthesize_fix(
    kind: MessageKind,
    node: CallLikeNode,
    boundaries: Boundaries,
    gap: Gap,
    source: SourceCode,
) -> TextEdit | None:
    """Return the edit repairing a violation of ``kind``, or ``None`` if it is unsafe.

    Args:
        kind (MessageKind): The violation to repair.
        node (CallLikeNode): The offending node.
        boundaries (Boundaries): The gap delimiters.
        gap (Gap): The classified gap.
        source (SourceCode): Token store, used to locate the ``?.`` marker.

    Returns:
        TextEdit | None: The edit, or ``None`` when the violation is reported unfixed.
    """
    edit: TextEdit | None
    if kind is MessageKind.UNEXPECTED_WHITESPACE:
        edit = _fix_unexpected_whitespace(node, boundaries, gap)
    elif kind is MessageKind.MISSING:
        edit = _fix_missing(node, boundaries, gap)
    else:
        edit = _fix_unexpected_newline(node, boundaries, gap, source)

    if edit is None:
        logger.debug("Withholding fix for %s at offset %d", kind.value, boundaries.left.end)
    return edit
