# topmark:header:start
#
#   project      : CallSpacing
#   file         : fixer.py
#   file_relpath : src/callspacing/pipeline/fixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply text edits to a source text in one pass.

Edits are applied in range order. An edit starting at or before the end of
the previously applied edit would overlap it and is skipped; the runner picks
it up again on its next pass, after re-analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from callspacing.config.logging import get_logger
from callspacing.constants import UTF8_BOM

if TYPE_CHECKING:
    from collections.abc import Iterable

    from callspacing.config.logging import CallSpacingLogger
    from callspacing.rule.fixes import TextEdit

logger: CallSpacingLogger = get_logger(__name__)


@dataclass(frozen=True)
class FixResult:
    """Outcome of one fix pass.

    Attributes:
        output (str): The text after applying every non-overlapping edit.
        applied (tuple[TextEdit, ...]): Edits that were applied.
        skipped (tuple[TextEdit, ...]): Edits skipped because they overlapped.
    """

    output: str
    applied: tuple[TextEdit, ...] = field(default_factory=tuple)
    skipped: tuple[TextEdit, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        """Return True if at least one edit was applied."""
        return bool(self.applied)


def apply_edits(text: str, edits: Iterable[TextEdit]) -> FixResult:
    """Apply ``edits`` to ``text``, skipping overlapping ones.

    A leading BOM is set aside so edit offsets match a BOM-less text, and is
    restored on output.

    Args:
        text (str): Original text (may start with a BOM).
        edits (Iterable[TextEdit]): Edits against ``text`` without its BOM.

    Returns:
        FixResult: The new text and the applied/skipped edits.
    """
    bom: str = UTF8_BOM if text.startswith(UTF8_BOM) else ""
    body: str = text[len(bom) :]

    pieces: list[str] = []
    applied: list[TextEdit] = []
    skipped: list[TextEdit] = []
    last_end: int = -1

    for edit in sorted(edits, key=lambda e: e.range):
        if edit.start <= last_end or edit.start > edit.end:
            logger.trace("Skipping overlapping edit %s", edit)
            skipped.append(edit)
            continue
        pieces.append(body[max(0, last_end) : edit.start])
        pieces.append(edit.text)
        applied.append(edit)
        last_end = edit.end

    if not applied:
        return FixResult(output=text, skipped=tuple(skipped))

    pieces.append(body[max(0, last_end) :])
    logger.debug("Applied %d edit(s), skipped %d", len(applied), len(skipped))
    return FixResult(output=bom + "".join(pieces), applied=tuple(applied), skipped=tuple(skipped))
