# topmark:header:start
#
#   project      : CallSpacing
#   file         : violation.py
#   file_relpath : src/callspacing/rule/violation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Violation records and their reporting locations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from callspacing.constants import RULE_ID
from callspacing.rule.decision import MessageKind
from callspacing.source.tokens import Position, SourceLocation

if TYPE_CHECKING:
    from callspacing.rule.fixes import TextEdit
    from callspacing.rule.nodes import Boundaries, CallLikeNode


def report_location(kind: MessageKind, boundaries: Boundaries) -> SourceLocation:
    """Return the span reported for a violation of ``kind``.

    * ``unexpectedWhitespace`` brackets the gap: from the end of the callee to
      one column before the paren.
    * ``missing`` covers the last callee character and ends at the paren, so
      the span is never inverted for an empty gap. This is the span ESLint
      reports for this rule.
    * ``unexpectedNewline`` runs from the end of the callee to the paren.
    """
    left_end: Position = boundaries.left.loc.end
    right_start: Position = boundaries.right.loc.start

    if kind is MessageKind.UNEXPECTED_WHITESPACE:
        return SourceLocation(
            start=left_end,
            end=Position(line=right_start.line, column=right_start.column - 1),
        )
    if kind is MessageKind.MISSING:
        return SourceLocation(
            start=Position(line=left_end.line, column=left_end.column - 1),
            end=right_start,
        )
    return SourceLocation(start=left_end, end=right_start)


@dataclass(frozen=True, slots=True)
class Violation:
    """One detected spacing breach.

    Attributes:
        node (CallLikeNode): The offending node.
        boundaries (Boundaries): The callee's last token and the opening paren.
        message_kind (MessageKind): What is wrong with the gap.
        loc (SourceLocation): Reported span.
        edit (TextEdit | None): Safe repair, or ``None`` when the fix is withheld.
    """

    node: CallLikeNode
    boundaries: Boundaries
    message_kind: MessageKind
    loc: SourceLocation
    edit: TextEdit | None = None

    rule_id = RULE_ID

    @property
    def message(self) -> str:
        """Return the human-readable message."""
        return self.message_kind.message

    @property
    def fixable(self) -> bool:
        """Return True if an edit accompanies this violation."""
        return self.edit is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping (1-based columns, like most editors)."""
        out: dict[str, Any] = {
            "rule": self.rule_id,
            "message_id": self.message_kind.value,
            "message": self.message,
            "node_type": self.node.kind.value,
            "line": self.loc.start.line,
            "column": self.loc.start.column + 1,
            "end_line": self.loc.end.line,
            "end_column": self.loc.end.column + 1,
            "fix": None,
        }
        if self.edit is not None:
            out["fix"] = {
                "kind": self.edit.kind.value,
                "range": [self.edit.start, self.edit.end],
                "text": self.edit.text,
            }
        return out
