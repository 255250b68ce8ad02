# topmark:header:start
#
#   project      : CallSpacing
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for the CallSpacing tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from callspacing.cli.exit_codes import ExitCode
from callspacing.cli.main import cli
from callspacing.config.policy import SpacingPolicy
from callspacing.pipeline.runner import lint_text
from callspacing.rule.function_call_spacing import check_spacing
from callspacing.source.javascript import parse_javascript

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from callspacing.rule.violation import Violation


def policy_of(options: Sequence[Any] | None = None) -> SpacingPolicy:
    """Return the policy for ESLint-style ``options`` (``None`` = defaults)."""
    return SpacingPolicy.from_options(options)


def lint_code(code: str, options: Sequence[Any] | None = None) -> list[Violation]:
    """Parse ``code`` and return the rule's violations."""
    parsed = parse_javascript(code)
    return check_spacing(parsed.source, parsed.nodes, policy_of(options))


def fix_code(code: str, options: Sequence[Any] | None = None) -> str:
    """Return ``code`` after applying every available fix."""
    return lint_text(code, policy_of(options), fix=True).output


def message_ids(code: str, options: Sequence[Any] | None = None) -> list[str]:
    """Return the message ids reported for ``code``."""
    return [v.message_kind.value for v in lint_code(code, options)]


def write_js(root: Path, name: str, text: str) -> Path:
    """Write ``text`` as UTF-8 to ``root / name`` (creating parents) and return the path."""
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI in the current working directory."""
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
