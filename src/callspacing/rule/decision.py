# topmark:header:start
#
#   project      : CallSpacing
#   file         : decision.py
#   file_relpath : src/callspacing/rule/decision.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Policy decision table.

The verdict for a gap is a lookup over
``(mode, allow_newlines, has_whitespace, has_newline)``:

    ======  ==============  ==============  ===========  =====================
    mode    allow_newlines  has_whitespace  has_newline  verdict
    ======  ==============  ==============  ===========  =====================
    never   any             False           False        OK
    never   any             True            any          unexpectedWhitespace
    always  False           False           False        missing
    always  False           True            False        OK
    always  False           True            True         unexpectedNewline
    always  True            False           False        missing
    always  True            True            any          OK
    ======  ==============  ==============  ===========  =====================

A line break without whitespace cannot be produced by `analyze_gap`, so those
keys are absent from the table.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from callspacing.config.policy import SpacingMode

if TYPE_CHECKING:
    from callspacing.config.policy import SpacingPolicy
    from callspacing.rule.gap import Gap


class MessageKind(str, Enum):
    """Kinds of spacing violations, valued by their message ids."""

    UNEXPECTED_WHITESPACE = "unexpectedWhitespace"
    UNEXPECTED_NEWLINE = "unexpectedNewline"
    MISSING = "missing"

    @property
    def message(self) -> str:
        """Return the human-readable message for this kind."""
        return MESSAGES[self]


MESSAGES: Final[dict[MessageKind, str]] = {
    MessageKind.UNEXPECTED_WHITESPACE: "Unexpected whitespace between function name and paren.",
    MessageKind.UNEXPECTED_NEWLINE: "Unexpected newline between function name and paren.",
    MessageKind.MISSING: "Missing space between function name and paren.",
}

DecisionKey = tuple[SpacingMode, bool, bool, bool]

_NEVER, _ALWAYS = SpacingMode.NEVER, SpacingMode.ALWAYS

DECISION_TABLE: Final[dict[DecisionKey, MessageKind | None]] = {
    # never: allow_newlines has no effect
    (_NEVER, False, False, False): None,
    (_NEVER, False, True, False): MessageKind.UNEXPECTED_WHITESPACE,
    (_NEVER, False, True, True): MessageKind.UNEXPECTED_WHITESPACE,
    (_NEVER, True, False, False): None,
    (_NEVER, True, True, False): MessageKind.UNEXPECTED_WHITESPACE,
    (_NEVER, True, True, True): MessageKind.UNEXPECTED_WHITESPACE,
    # always
    (_ALWAYS, False, False, False): MessageKind.MISSING,
    (_ALWAYS, False, True, False): None,
    (_ALWAYS, False, True, True): MessageKind.UNEXPECTED_NEWLINE,
    # always, newlines allowed
    (_ALWAYS, True, False, False): MessageKind.MISSING,
    (_ALWAYS, True, True, False): None,
    (_ALWAYS, True, True, True): None,
}


def decide(policy: SpacingPolicy, gap: Gap) -> MessageKind | None:
    """Return the violation kind for ``gap`` under ``policy``, or ``None`` if it complies."""
    key: DecisionKey = (policy.mode, policy.allow_newlines, gap.has_whitespace, gap.has_newline)
    return DECISION_TABLE[key]
