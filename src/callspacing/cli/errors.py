# topmark:header:start
#
#   project      : CallSpacing
#   file         : errors.py
#   file_relpath : src/callspacing/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CallSpacing CLI.

Raise these in commands to stop with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from callspacing.cli.exit_codes import ExitCode


class CallSpacingError(click.ClickException):
    """Base class for all CallSpacing CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class CallSpacingUsageError(CallSpacingError):
    """Error for command-line invocation errors (conflicting flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CallSpacingConfigError(CallSpacingError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CallSpacingFileNotFoundError(CallSpacingError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND

