# topmark:header:start
#
#   project      : CallSpacing
#   file         : diff.py
#   file_relpath : src/callspacing/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs of fixed files and their colorized preview."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from callspacing.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from callspacing.config.logging import CallSpacingLogger

logger: CallSpacingLogger = get_logger(__name__)


def unified_diff(original: str, updated: str, path: str) -> list[str]:
    """Return the unified diff between ``original`` and ``updated``.

    Lines keep their original line endings, so a changed ``\\r\\n`` shows up.

    Args:
        original (str): Text before fixing.
        updated (str): Text after fixing.
        path (str): Name used in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines (each ending with a newline); empty if equal.
    """
    if original == updated:
        return []
    lines = list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (fixed)",
            n=3,
        )
    )
    logger.trace("Diff for %s: %d line(s)", path, len(lines))
    return [line if line.endswith(("\n", "\r")) else line + "\n" for line in lines]


def render_patch(
    patch: Sequence[str] | str, show_line_numbers: bool = False, color: bool = True
) -> str:
    """Render a preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as lines or a single string.
        show_line_numbers (bool): Whether to prefix output with line numbers.
        color (bool): Colorize added/removed lines with yachalk.

    Returns:
        str: The formatted diff preview, one line per diff line.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        if not color:
            return content
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
