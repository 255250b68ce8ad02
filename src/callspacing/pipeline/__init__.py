# topmark:header:start
#
#   project      : CallSpacing
#   file         : __init__.py
#   file_relpath : src/callspacing/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lint/fix runner: edit application, multi-pass fixing and per-file results."""

from __future__ import annotations

from callspacing.pipeline.fixer import FixResult, apply_edits
from callspacing.pipeline.outcomes import FileError, FileOutcome, FileResult, LintResult
from callspacing.pipeline.runner import lint_file, lint_text

__all__ = [
    "FileError",
    "FileOutcome",
    "FileResult",
    "FixResult",
    "LintResult",
    "apply_edits",
    "lint_file",
    "lint_text",
]
