# topmark:header:start
#
#   project      : CallSpacing
#   file         : version.py
#   file_relpath : src/callspacing/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallSpacing `version` command.

Prints the CallSpacing version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from callspacing.cli.options import EnumChoiceParam, OutputFormat
from callspacing.constants import CALLSPACING_VERSION

if TYPE_CHECKING:
    from callspacing.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of CallSpacing.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of CallSpacing.

    Args:
        output_format (OutputFormat | None): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": CALLSPACING_VERSION}))
    else:
        console.print(CALLSPACING_VERSION)
