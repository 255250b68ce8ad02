# topmark:header:start
#
#   project      : CallSpacing
#   file         : check.py
#   file_relpath : src/callspacing/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallSpacing `check` command.

Reports spacing violations between callees and their argument lists.
Performs a dry run by default and writes fixes when ``--apply`` is given.

Examples:
  Check the current directory:

    $ callspacing check

  Require a space and show what fixing would change:

    $ callspacing check --mode=always --diff src

  Fix files in place and print a summary:

    $ callspacing check --apply --summary .
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from callspacing.cli.config_resolver import resolve_config_from_click
from callspacing.cli.emitters import emit_human, emit_json, render_summary
from callspacing.cli.errors import CallSpacingFileNotFoundError, CallSpacingUsageError
from callspacing.cli.exit_codes import ExitCode
from callspacing.cli.options import (
    EnumChoiceParam,
    OutputFormat,
    common_config_options,
    common_file_filtering_options,
    common_policy_options,
)
from callspacing.config.logging import get_logger
from callspacing.file_resolver import find_missing_paths, resolve_file_list
from callspacing.pipeline.outcomes import FileError, FileOutcome
from callspacing.pipeline.runner import lint_file

if TYPE_CHECKING:
    from collections.abc import Sequence

    from callspacing.cli.console import ClickConsole
    from callspacing.config.logging import CallSpacingLogger
    from callspacing.config.policy import SpacingMode
    from callspacing.pipeline.outcomes import FileResult

logger: CallSpacingLogger = get_logger(__name__)

# Exit code per error category; the first error (in path order) decides.
ERROR_EXIT_CODES: dict[FileError, ExitCode] = {
    FileError.PARSE_ERROR: ExitCode.DATA_ERROR,
    FileError.DECODE_ERROR: ExitCode.DATA_ERROR,
    FileError.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    FileError.UNREADABLE: ExitCode.IO_ERROR,
    FileError.UNWRITABLE: ExitCode.IO_ERROR,
}


def determine_exit_code(results: Sequence[FileResult]) -> ExitCode:
    """Return the process exit code for ``results``.

    Errors take precedence over violations; among errors the first one in
    path order decides.
    """
    for result in results:
        if result.outcome is FileOutcome.ERROR and result.error is not None:
            return ERROR_EXIT_CODES[result.error]
    if any(r.outcome is FileOutcome.VIOLATIONS for r in results):
        return ExitCode.VIOLATIONS
    return ExitCode.SUCCESS


@click.command(
    name="check",
    help="Report spacing between function names and '(' (dry-run). Use --apply to fix.",
    epilog="""\
Examples:

  # Report violations under src/
  callspacing check src

  # Fix files in place
  callspacing check --apply .
""",
)
@click.argument("paths", nargs=-1, type=click.Path())
@common_policy_options
@common_config_options
@common_file_filtering_options
@click.option("--apply", "apply_changes", is_flag=True, help="Write fixes to files.")
@click.option("--diff", is_flag=True, help="Show unified diffs of fixes (human output only).")
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show outcome counts instead of per-violation lines.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def check_command(
    *,
    paths: tuple[str, ...],
    mode: SpacingMode | None,
    allow_newlines: bool | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    apply_changes: bool,
    diff: bool,
    summary_mode: bool,
    output_format: OutputFormat | None,
) -> None:
    """Check (and optionally fix) call spacing in JavaScript files.

    Args:
        paths (tuple[str, ...]): Files, directories or globs (default: ``.``).
        mode (SpacingMode | None): Spacing mode override.
        allow_newlines (bool | None): ``allow_newlines`` override.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Additional config files to merge.
        include_patterns (tuple[str, ...]): Patterns to include (intersection).
        exclude_patterns (tuple[str, ...]): Patterns to exclude (subtraction).
        apply_changes (bool): Write fixes; otherwise perform a dry run.
        diff (bool): Show unified diffs of fixes (human output only).
        summary_mode (bool): Show outcome counts instead of per-violation lines.
        output_format (OutputFormat | None): ``default`` or ``json``.

    Raises:
        CallSpacingUsageError: If ``--diff`` is combined with ``--format json``.
        CallSpacingFileNotFoundError: If a literal input path does not exist.

    Exit Status:
        SUCCESS (0): No violations remain.
        VIOLATIONS (1): Violations remain.
        USAGE_ERROR (64): Conflicting options.
        DATA_ERROR (65): A file could not be decoded or parsed.
        FILE_NOT_FOUND (66): An input path does not exist.
        IO_ERROR (74): A file could not be read or written.
        CONFIG_ERROR (78): A config file is missing or invalid.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt is OutputFormat.JSON and diff:
        raise CallSpacingUsageError(
            f"{ctx.command.name}: --diff is not supported with machine-readable output formats."
        )

    missing = find_missing_paths(paths)
    if missing:
        raise CallSpacingFileNotFoundError(f"No such file or directory: {', '.join(missing)}")

    config = resolve_config_from_click(
        files=list(paths),
        config_paths=list(config_paths),
        no_config=no_config,
        mode=mode,
        allow_newlines=allow_newlines,
        include_patterns=list(include_patterns),
        exclude_patterns=list(exclude_patterns),
    )
    logger.debug("Policy: %s", config.policy)

    file_list = resolve_file_list(config)
    if not file_list:
        if fmt is OutputFormat.JSON:
            emit_json(console, [])
        else:
            console.print(console.styled("No files to check.", fg="yellow"))
        return

    results: list[FileResult] = [
        lint_file(path, config, fix=diff, apply=apply_changes) for path in file_list
    ]

    if fmt is OutputFormat.JSON:
        emit_json(console, results)
    else:
        if summary_mode:
            for result in results:
                if result.outcome is FileOutcome.ERROR:
                    console.error(f"{result.path}: {result.error_message}")
            render_summary(console, results)
        else:
            emit_human(console, results, show_diff=diff, relative_to=config.relative_to)

    exit_code = determine_exit_code(results)
    if exit_code is not ExitCode.SUCCESS:
        ctx.exit(int(exit_code))
