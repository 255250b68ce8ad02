# topmark:header:start
#
#   project      : CallSpacing
#   file         : function_call_spacing.py
#   file_relpath : src/callspacing/rule/function_call_spacing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``function-call-spacing`` rule.

Require or disallow spacing between a callee and the parenthesis opening its
argument list, for calls, ``new`` expressions and dynamic ``import()``.

Each node is handled independently:

1. `resolve_boundaries` finds the callee's last token and the paren;
2. `analyze_gap` classifies the text between them;
3. `decide` looks the classification up in the decision table;
4. on a violation, `synthesize_fix` proposes an edit (or withholds it).

The rule never mutates the source; violations carry edit descriptions only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from callspacing.config.logging import get_logger
from callspacing.rule.decision import decide
from callspacing.rule.fixes import synthesize_fix
from callspacing.rule.gap import analyze_gap
from callspacing.rule.nodes import NodeKind
from callspacing.rule.violation import Violation, report_location

if TYPE_CHECKING:
    from collections.abc import Iterable

    from callspacing.config.logging import CallSpacingLogger
    from callspacing.config.policy import SpacingPolicy
    from callspacing.rule.nodes import CallLikeNode, CallNode, ConstructNode, DynamicImportNode
    from callspacing.source.code import SourceCode

logger: CallSpacingLogger = get_logger(__name__)


class FunctionCallSpacingRule:
    """Visitor checking the callee/paren gap of every call-like node.

    Args:
        source (SourceCode): Token store of the file being checked.
        policy (SpacingPolicy): The resolved spacing policy.
    """

    def __init__(self, source: SourceCode, policy: SpacingPolicy) -> None:
        self.source = source
        self.policy = policy
        self.violations: list[Violation] = []

    def visitors(self) -> dict[NodeKind, Callable[..., None]]:
        """Return the handler registered for each node kind."""
        return {
            NodeKind.CALL: self.visit_call_expression,
            NodeKind.CONSTRUCT: self.visit_new_expression,
            NodeKind.DYNAMIC_IMPORT: self.visit_import_expression,
        }

    def visit_call_expression(self, node: CallNode) -> None:
        """Check an ordinary (possibly optional) call."""
        self._check_node(node)

    def visit_new_expression(self, node: ConstructNode) -> None:
        """Check a constructor call; ``new Foo`` without parens is skipped."""
        self._check_node(node)

    def visit_import_expression(self, node: DynamicImportNode) -> None:
        """Check a dynamic ``import()``."""
        self._check_node(node)

    def check(self, nodes: Iterable[CallLikeNode]) -> list[Violation]:
        """Visit ``nodes`` and return the violations found, in source order."""
        handlers = self.visitors()
        for node in nodes:
            handlers[node.kind](node)
        self.violations.sort(key=lambda v: (v.boundaries.left.end, v.boundaries.right.start))
        return self.violations

    def _check_node(self, node: CallLikeNode) -> None:
        boundaries = node.resolve_boundaries(self.source)
        if boundaries is None:
            logger.trace("Skipping %s at %s: no argument list", node.kind.value, node.range)
            return

        gap = analyze_gap(self.source, boundaries)
        kind = decide(self.policy, gap)
        if kind is None:
            return

        violation = Violation(
            node=node,
            boundaries=boundaries,
            message_kind=kind,
            loc=report_location(kind, boundaries),
            edit=synthesize_fix(kind, node, boundaries, gap, self.source),
        )
        logger.debug(
            "%s at %d:%d (%s)",
            kind.value,
            violation.loc.start.line,
            violation.loc.start.column,
            "fixable" if violation.fixable else "not fixable",
        )
        self.violations.append(violation)


def check_spacing(
    source: SourceCode, nodes: Iterable[CallLikeNode], policy: SpacingPolicy
) -> list[Violation]:
    """Run the rule over ``nodes`` and return its violations.

    Args:
        source (SourceCode): Token store of the file.
        nodes (Iterable[CallLikeNode]): Every call-like node of the file.
        policy (SpacingPolicy): The resolved spacing policy.

    Returns:
        list[Violation]: Violations in source order.
    """
    return FunctionCallSpacingRule(source, policy).check(nodes)
