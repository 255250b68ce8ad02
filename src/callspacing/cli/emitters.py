# topmark:header:start
#
#   project      : CallSpacing
#   file         : emitters.py
#   file_relpath : src/callspacing/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render check results for humans and machines.

Human output prints one line per violation::

    src/app.js:3:4: Unexpected whitespace between function name and paren. [function-call-spacing] (fixable)

followed by optional diffs and a summary. Machine output (``--format json``)
is a single JSON array of per-file objects and never carries color or diffs.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

from callspacing.pipeline.outcomes import FileOutcome
from callspacing.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from collections.abc import Sequence

    from callspacing.cli.console import ClickConsole
    from callspacing.pipeline.outcomes import FileResult
    from callspacing.rule.violation import Violation


def display_path(path: Path, base: Path | None = None) -> str:
    """Return ``path`` relative to ``base`` (the CWD by default) when possible."""
    root = base or Path.cwd()
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def format_violation(path_str: str, violation: Violation) -> str:
    """Return the human line for one violation (1-based column)."""
    line = (
        f"{path_str}:{violation.loc.start.line}:{violation.loc.start.column + 1}: "
        f"{violation.message} [{violation.rule_id}]"
    )
    return f"{line} (fixable)" if violation.fixable else line


def result_diff(result: FileResult, path_str: str) -> list[str]:
    """Return the diff of the fix applied (or previewed) for ``result``."""
    if result.lint is None:
        return []
    if result.written:
        return unified_diff(result.lint.source_text, result.lint.output, path_str)
    if result.fixed_output is not None:
        return unified_diff(result.lint.source_text, result.fixed_output, path_str)
    return []


def emit_human(
    console: ClickConsole,
    results: Sequence[FileResult],
    *,
    show_diff: bool,
    relative_to: Path | None = None,
) -> None:
    """Print violations, errors, fix notes and (optionally) diffs per file."""
    for result in results:
        path_str = display_path(result.path, relative_to)
        if result.outcome is FileOutcome.ERROR:
            kind = result.error.value if result.error is not None else "error"
            console.error(f"{path_str}: {kind}: {result.error_message}")
            continue
        for violation in result.violations:
            console.print(format_violation(path_str, violation))
        if result.written and result.lint is not None:
            console.print(
                console.styled(
                    f"{path_str}: fixed {result.lint.fixed_count} violation(s)", fg="blue"
                )
            )
        if show_diff:
            patch = result_diff(result, path_str)
            if patch:
                console.print(render_patch(patch, color=console.enable_color), nl=False)


def render_summary(console: ClickConsole, results: Sequence[FileResult]) -> None:
    """Print per-outcome file counts and the number of remaining violations."""
    counts: Counter[FileOutcome] = Counter(r.outcome for r in results)
    total = len(results)
    remaining = sum(len(r.violations) for r in results)
    fixable = sum(1 for r in results for v in r.violations if v.fixable)

    console.print()
    console.print(console.styled("Summary by outcome:", bold=True, underline=True))
    label_width: int = max(len(o.value) for o in FileOutcome) + 1
    num_width: int = len(str(total))
    for outcome in FileOutcome:
        n = counts.get(outcome, 0)
        if n:
            console.print(
                outcome.styled(console.enable_color)
                + " " * (label_width - len(outcome.value))
                + f": {n:>{num_width}}"
            )
    console.print(f"{remaining} violation(s) remaining, {fixable} fixable, in {total} file(s).")


def emit_json(console: ClickConsole, results: Sequence[FileResult]) -> None:
    """Print all results as one JSON array."""
    console.print(json.dumps([r.to_dict() for r in results], indent=2))
