# topmark:header:start
#
#   project      : CallSpacing
#   file         : __init__.py
#   file_relpath : src/callspacing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallSpacing: the ``function-call-spacing`` lint rule for JavaScript.

Require or disallow whitespace between a callee and the parenthesis opening
its argument list, for calls, ``new`` expressions and dynamic ``import()``,
with automatic fixes where they are safe.

Typical use::

    from callspacing import SpacingPolicy, lint_text

    result = lint_text("foo ();", SpacingPolicy(), fix=True)
    result.output  # 'foo();'
"""

from __future__ import annotations

from callspacing.config import Config, SpacingMode, SpacingPolicy
from callspacing.constants import CALLSPACING_VERSION
from callspacing.pipeline import FileOutcome, FileResult, LintResult, lint_file, lint_text

__version__: str = CALLSPACING_VERSION

__all__ = [
    "Config",
    "FileOutcome",
    "FileResult",
    "LintResult",
    "SpacingMode",
    "SpacingPolicy",
    "__version__",
    "lint_file",
    "lint_text",
]
