# topmark:header:start
#
#   project      : CallSpacing
#   file         : nodes.py
#   file_relpath : src/callspacing/rule/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-like nodes and boundary resolution.

The three call-like forms share one operation, ``resolve_boundaries``, which
returns the pair of tokens delimiting the gap to check:

* ``left``: the last token of the callee (which may be a closing paren that
  encloses the callee), never the optional-chaining marker ``?.``;
* ``right``: the ``(`` that opens the argument list.

Only a constructor call written without parentheses (``new Foo``) resolves to
``None`` and is skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from callspacing.source.tokens import is_opening_paren_token, is_question_dot_token

if TYPE_CHECKING:
    from callspacing.source.code import SourceCode
    from callspacing.source.tokens import Token


class NodeKind(str, Enum):
    """Discriminator of the call-like node variants (ESTree names)."""

    CALL = "CallExpression"
    CONSTRUCT = "NewExpression"
    DYNAMIC_IMPORT = "ImportExpression"


@dataclass(frozen=True, slots=True)
class Boundaries:
    """The two tokens that delimit a gap."""

    left: Token
    right: Token


def _resolve_callee_boundaries(
    source: SourceCode, node_range: tuple[int, int], callee_range: tuple[int, int]
) -> Boundaries | None:
    last_token = source.get_last_token(node_range)
    last_callee_token = source.get_last_token(callee_range)
    if last_token is None or last_callee_token is None:
        return None

    paren = source.get_first_token_between(last_callee_token, last_token, is_opening_paren_token)
    # Parens are optional on `new`; a paren found past the node does not count.
    if paren is None or paren.end >= node_range[1]:
        return None

    prev = source.get_token_before(paren, skip=is_question_dot_token)
    if prev is None:
        return None
    return Boundaries(left=prev, right=paren)


@dataclass(frozen=True, slots=True)
class CallNode:
    """An ordinary call ``callee(args)``, optionally ``callee?.(args)``."""

    range: tuple[int, int]
    callee_range: tuple[int, int]
    optional: bool = False

    kind = NodeKind.CALL

    def resolve_boundaries(self, source: SourceCode) -> Boundaries | None:
        """Return the gap boundaries of this call."""
        return _resolve_callee_boundaries(source, self.range, self.callee_range)


@dataclass(frozen=True, slots=True)
class ConstructNode:
    """A constructor call ``new Callee(args)`` or ``new Callee``."""

    range: tuple[int, int]
    callee_range: tuple[int, int]

    kind = NodeKind.CONSTRUCT

    @property
    def optional(self) -> bool:
        """Constructor calls cannot be optional-chained."""
        return False

    def resolve_boundaries(self, source: SourceCode) -> Boundaries | None:
        """Return the gap boundaries, or ``None`` when the call has no parentheses."""
        return _resolve_callee_boundaries(source, self.range, self.callee_range)


@dataclass(frozen=True, slots=True)
class DynamicImportNode:
    """A dynamic module load ``import(source)``."""

    range: tuple[int, int]

    kind = NodeKind.DYNAMIC_IMPORT

    @property
    def optional(self) -> bool:
        """Dynamic imports cannot be optional-chained."""
        return False

    def resolve_boundaries(self, source: SourceCode) -> Boundaries | None:
        """Return the ``import`` keyword and the paren right after it."""
        keyword = source.get_first_token(self.range)
        if keyword is None:
            return None
        paren = source.get_token_after(keyword)
        if paren is None:
            return None
        return Boundaries(left=keyword, right=paren)


CallLikeNode = Union[CallNode, ConstructNode, DynamicImportNode]
