# topmark:header:start
#
#   project      : CallSpacing
#   file         : runner.py
#   file_relpath : src/callspacing/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lint and fix texts and files.

`lint_text` parses a text, runs the rule and, when fixing, applies the
proposed edits and lints again until no edit applies (bounded by
`MAX_FIX_PASSES`). `lint_file` wraps it with file I/O and classifies the
result into a `FileOutcome`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from callspacing.config.logging import get_logger
from callspacing.constants import MAX_FIX_PASSES, UTF8_BOM
from callspacing.pipeline.fixer import apply_edits
from callspacing.pipeline.outcomes import FileError, FileOutcome, FileResult, LintResult
from callspacing.rule.function_call_spacing import check_spacing
from callspacing.source.javascript import JavaScriptParseError, parse_javascript

if TYPE_CHECKING:
    from pathlib import Path

    from callspacing.config.logging import CallSpacingLogger
    from callspacing.config.model import Config
    from callspacing.config.policy import SpacingPolicy
    from callspacing.rule.violation import Violation

logger: CallSpacingLogger = get_logger(__name__)


def _lint_once(text: str, policy: SpacingPolicy) -> list[Violation]:
    body: str = text[1:] if text.startswith(UTF8_BOM) else text
    parsed = parse_javascript(body)
    return check_spacing(parsed.source, parsed.nodes, policy)


def lint_text(text: str, policy: SpacingPolicy, *, fix: bool = False) -> LintResult:
    """Lint ``text`` and optionally fix it.

    A leading BOM is not part of the analyzed text; it is kept in the output.

    Args:
        text (str): JavaScript source text.
        policy (SpacingPolicy): The spacing policy.
        fix (bool): Apply fixes, re-linting after each pass.

    Returns:
        LintResult: Violations remaining in the (possibly fixed) output.

    Raises:
        JavaScriptParseError: If the text does not parse.
    """
    current: str = text
    violations = _lint_once(current, policy)
    fixed_count: int = 0
    passes: int = 0

    while fix and passes < MAX_FIX_PASSES:
        edits = [v.edit for v in violations if v.edit is not None]
        if not edits:
            break
        result = apply_edits(current, edits)
        if not result.changed:
            break
        passes += 1
        fixed_count += len(result.applied)
        current = result.output
        logger.trace("Fix pass %d applied %d edit(s)", passes, len(result.applied))
        violations = _lint_once(current, policy)

    return LintResult(
        source_text=text,
        output=current,
        violations=tuple(violations),
        fixed_count=fixed_count,
        passes=passes,
    )


def _error(path: Path, error: FileError, message: str) -> FileResult:
    logger.error("%s: %s", path, message)
    return FileResult(
        path=path,
        outcome=FileOutcome.ERROR,
        error=error,
        error_message=message,
    )


def lint_file(path: Path, config: Config, *, fix: bool = False, apply: bool = False) -> FileResult:
    """Lint one file.

    Without ``apply``, every violation found is reported and, when ``fix`` is
    set, the fixed text is computed for preview (``FileResult.fixed_output``).
    With ``apply``, fixes are written back and only the violations left after
    fixing are reported.

    Args:
        path (Path): The file to lint.
        config (Config): The runtime configuration.
        fix (bool): Compute the fixed text.
        apply (bool): Write the fixed text back (implies ``fix``).

    Returns:
        FileResult: The classified result; I/O, decoding and parse problems
        yield an ``ERROR`` outcome instead of raising.
    """
    logger.debug("Linting %s", path)
    try:
        raw: bytes = path.read_bytes()
    except FileNotFoundError:
        return _error(path, FileError.NOT_FOUND, "file not found")
    except OSError as exc:
        return _error(path, FileError.UNREADABLE, str(exc))

    try:
        # No newline translation: offsets and line endings must survive a rewrite.
        text: str = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        return _error(path, FileError.DECODE_ERROR, f"not valid UTF-8 ({exc.reason})")

    try:
        found = lint_text(text, config.policy)
        fixed = (
            lint_text(text, config.policy, fix=True)
            if (fix or apply) and found.fixable_count
            else None
        )
    except JavaScriptParseError as exc:
        return _error(path, FileError.PARSE_ERROR, str(exc))

    if not apply:
        outcome = FileOutcome.VIOLATIONS if found.violations else FileOutcome.CLEAN
        return FileResult(
            path=path,
            outcome=outcome,
            lint=found,
            fixed_output=fixed.output if fixed is not None and fixed.changed else None,
        )

    final = fixed if fixed is not None else found
    written: bool = False
    if final.changed:
        try:
            path.write_bytes(final.output.encode("utf-8"))
        except OSError as exc:
            return _error(path, FileError.UNWRITABLE, str(exc))
        written = True
        logger.info("Fixed %d violation(s) in %s", final.fixed_count, path)

    if final.violations:
        outcome = FileOutcome.VIOLATIONS
    elif written:
        outcome = FileOutcome.FIXED
    else:
        outcome = FileOutcome.CLEAN
    return FileResult(path=path, outcome=outcome, lint=final, written=written)
