# topmark:header:start
#
#   project      : CallSpacing
#   file         : __init__.py
#   file_relpath : src/callspacing/rule/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The function-call-spacing rule and its building blocks.

Design:
    - Nodes (`CallNode`, `ConstructNode`, `DynamicImportNode`) resolve their own
      gap boundaries.
    - `analyze_gap` classifies the gap, `decide` maps it to a `MessageKind`,
      and `synthesize_fix` proposes a `TextEdit` or withholds it.
    - `FunctionCallSpacingRule` ties the steps together per node.
"""

from __future__ import annotations

from callspacing.rule.decision import DECISION_TABLE, MessageKind, decide
from callspacing.rule.fixes import EditKind, TextEdit, synthesize_fix
from callspacing.rule.function_call_spacing import FunctionCallSpacingRule, check_spacing
from callspacing.rule.gap import Gap, analyze_gap
from callspacing.rule.nodes import (
    Boundaries,
    CallLikeNode,
    CallNode,
    ConstructNode,
    DynamicImportNode,
    NodeKind,
)
from callspacing.rule.violation import Violation, report_location

__all__ = [
    "DECISION_TABLE",
    "Boundaries",
    "CallLikeNode",
    "CallNode",
    "ConstructNode",
    "DynamicImportNode",
    "EditKind",
    "FunctionCallSpacingRule",
    "Gap",
    "MessageKind",
    "NodeKind",
    "TextEdit",
    "Violation",
    "analyze_gap",
    "check_spacing",
    "decide",
    "report_location",
    "synthesize_fix",
]
