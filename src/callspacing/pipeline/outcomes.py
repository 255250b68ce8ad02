# topmark:header:start
#
#   project      : CallSpacing
#   file         : outcomes.py
#   file_relpath : src/callspacing/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result types produced by the runner.

`LintResult` describes one lint (and optional fix) run over a text;
`FileResult` wraps it with the file path and a coarse `FileOutcome` bucket.
Both are presentation-free: coloring is left to the CLI, through the
colorizer each `FileOutcome` / `FileError` member carries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from yachalk import chalk

from callspacing.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from pathlib import Path

    from callspacing.rule.violation import Violation


class FileOutcome(ColoredStrEnum):
    """Coarse per-file outcome."""

    CLEAN = ("clean", chalk.green)
    VIOLATIONS = ("violations", chalk.red)
    FIXED = ("fixed", chalk.blue)
    ERROR = ("error", chalk.red_bright)


class FileError(ColoredStrEnum):
    """Why a file could not be checked."""

    PARSE_ERROR = ("parse error", chalk.red_bright)
    DECODE_ERROR = ("Unicode decode error", chalk.yellow)
    NOT_FOUND = ("not found", chalk.red)
    UNREADABLE = ("read error", chalk.red_bright)
    UNWRITABLE = ("write error", chalk.red_bright)


@dataclass(frozen=True)
class LintResult:
    """Outcome of linting (and optionally fixing) one text.

    Attributes:
        source_text (str): The input text.
        output (str): The text after fixing (equal to ``source_text`` when not fixing).
        violations (tuple[Violation, ...]): Violations found in ``output``.
        fixed_count (int): Number of edits applied over all passes.
        passes (int): Number of fix passes that applied at least one edit.
    """

    source_text: str
    output: str
    violations: tuple[Violation, ...] = ()
    fixed_count: int = 0
    passes: int = 0

    @property
    def changed(self) -> bool:
        """Return True if fixing altered the text."""
        return self.output != self.source_text

    @property
    def fixable_count(self) -> int:
        """Return the number of violations that carry an edit."""
        return sum(1 for v in self.violations if v.fixable)


@dataclass(frozen=True)
class FileResult:
    """Outcome of processing one file.

    Attributes:
        path (Path): The file.
        outcome (FileOutcome): Coarse bucket.
        lint (LintResult | None): Lint details; ``None`` on error.
        error (FileError | None): Error category when ``outcome`` is ``ERROR``.
        error_message (str | None): Human-readable error detail.
        written (bool): Whether the fixed text was written back.
    """

    path: Path
    outcome: FileOutcome
    lint: LintResult | None = None
    error: FileError | None = None
    error_message: str | None = None
    written: bool = False
    fixed_output: str | None = field(default=None, repr=False)

    @property
    def violations(self) -> tuple[Violation, ...]:
        """Return the reported violations (empty on error)."""
        return self.lint.violations if self.lint is not None else ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this result."""
        return {
            "path": str(self.path),
            "outcome": self.outcome.value,
            "error": self.error.value if self.error is not None else None,
            "error_message": self.error_message,
            "fixed": self.lint.fixed_count if self.lint is not None else 0,
            "written": self.written,
            "violations": [v.to_dict() for v in self.violations],
        }
