# topmark:header:start
#
#   project      : CallSpacing
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for shared CLI options and group behavior."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
import pytest

from callspacing.cli.errors import CallSpacingUsageError
from callspacing.cli.exit_codes import ExitCode
from callspacing.cli.options import (
    ColorMode,
    EnumChoiceParam,
    OutputFormat,
    resolve_color_mode,
    resolve_verbosity,
)
from callspacing.config.logging import TRACE_LEVEL
from callspacing.config.policy import SpacingMode
from tests.helpers import assert_exit, run_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_conflict() -> None:
    with pytest.raises(CallSpacingUsageError):
        resolve_verbosity(1, 1)


def test_verbose_and_quiet_conflict_exit_code(isolation: Path) -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@pytest.mark.parametrize(
    "cli_mode, output_format, isatty, expected",
    [
        (ColorMode.ALWAYS, None, False, True),
        (ColorMode.NEVER, None, True, False),
        (ColorMode.ALWAYS, OutputFormat.JSON, True, False),
        (ColorMode.AUTO, None, True, True),
        (ColorMode.AUTO, None, False, False),
        (None, None, True, True),
    ],
)
def test_resolve_color_mode(
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    isatty: bool,
    expected: bool,
) -> None:
    assert (
        resolve_color_mode(cli_mode=cli_mode, output_format=output_format, stdout_isatty=isatty)
        is expected
    )


def test_color_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, output_format=None, stdout_isatty=False)
    monkeypatch.setenv("FORCE_COLOR", "0")
    monkeypatch.setenv("NO_COLOR", "1")
    assert not resolve_color_mode(cli_mode=ColorMode.AUTO, output_format=None, stdout_isatty=True)


def test_enum_choice_param() -> None:
    param = EnumChoiceParam(SpacingMode)
    assert param.convert("ALWAYS", None, None) is SpacingMode.ALWAYS
    assert param.convert(SpacingMode.NEVER, None, None) is SpacingMode.NEVER
    with pytest.raises(click.BadParameter, match="never, always"):
        param.convert("sometimes", None, None)


def test_group_without_subcommand_prints_hint(isolation: Path) -> None:
    result = run_cli([])
    assert_exit(result, ExitCode.SUCCESS)
    assert "Hint: use 'callspacing check [PATHS...]'" in result.output
    assert "check" in result.output
    assert "version" in result.output


def test_check_help_lists_options(isolation: Path) -> None:
    result = run_cli(["check", "--help"])
    assert_exit(result, ExitCode.SUCCESS)
    for option in ("--mode", "--allow-newlines", "--apply", "--diff", "--format", "--no-config"):
        assert option in result.output
