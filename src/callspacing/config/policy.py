# topmark:header:start
#
#   project      : CallSpacing
#   file         : policy.py
#   file_relpath : src/callspacing/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Spacing policy model for the function-call-spacing rule.

Design:
    * ``MutableSpacingPolicy`` uses tri-state options (``None`` means *unset*) so
      several sources (defaults → project config → ``--config`` files → CLI) can
      be merged last-wins without clobbering explicit values.
    * ``SpacingPolicy`` is the fully-resolved, immutable runtime view. It is
      resolved once per run and never changes while files are checked.

TOML mapping:

    [tool.callspacing]
    mode = "always"
    allow_newlines = true

ESLint-style option lists are accepted too, see `SpacingPolicy.from_options`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from callspacing.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from callspacing.config.logging import CallSpacingLogger

logger: CallSpacingLogger = get_logger(__name__)


class PolicyError(ValueError):
    """Raised when spacing options do not describe a valid policy."""


class SpacingMode(str, Enum):
    """Whether a space is required or forbidden between callee and paren."""

    NEVER = "never"
    ALWAYS = "always"

    @classmethod
    def parse(cls, value: object) -> SpacingMode:
        """Return the mode named by ``value`` (case-insensitive).

        Raises:
            PolicyError: If ``value`` does not name a mode.
        """
        if isinstance(value, SpacingMode):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        raise PolicyError(
            f"Invalid spacing mode {value!r}; expected one of: "
            f"{', '.join(m.value for m in cls)}"
        )


@dataclass(frozen=True, slots=True)
class SpacingPolicy:
    """Immutable, resolved spacing policy.

    Attributes:
        mode (SpacingMode): ``never`` forbids whitespace, ``always`` requires it.
        allow_newlines (bool): Accept line breaks in the gap. Only meaningful with
            ``mode = always``; always ``False`` under ``never``.
    """

    mode: SpacingMode = SpacingMode.NEVER
    allow_newlines: bool = False

    def __post_init__(self) -> None:
        if self.mode is SpacingMode.NEVER and self.allow_newlines:
            logger.warning("allow_newlines is ignored when mode is 'never'")
            object.__setattr__(self, "allow_newlines", False)

    @property
    def never(self) -> bool:
        """Return True if the policy forbids whitespace."""
        return self.mode is SpacingMode.NEVER

    @classmethod
    def from_options(cls, options: Sequence[Any] | None) -> SpacingPolicy:
        """Build a policy from an ESLint-style options list.

        Accepted shapes: ``[]``, ``["never"]``, ``["always"]`` and
        ``["always", {"allowNewlines": bool}]``.

        Args:
            options (Sequence[Any] | None): The raw options list.

        Returns:
            SpacingPolicy: The resolved policy.

        Raises:
            PolicyError: If the list does not match one of the accepted shapes.
        """
        if not options:
            return cls()

        mode = SpacingMode.parse(options[0])
        extra = list(options[1:])

        if mode is SpacingMode.NEVER:
            if extra:
                raise PolicyError("'never' does not accept additional options")
            return cls(mode=mode)

        if len(extra) > 1:
            raise PolicyError("'always' accepts at most one options object")
        if not extra:
            return cls(mode=mode)

        obj = extra[0]
        if not isinstance(obj, dict):
            raise PolicyError(f"Expected an options object after 'always', got {obj!r}")
        unknown = set(obj) - {"allowNewlines"}
        if unknown:
            raise PolicyError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        allow = obj.get("allowNewlines", False)
        if not isinstance(allow, bool):
            raise PolicyError(f"'allowNewlines' must be a boolean, got {allow!r}")
        return cls(mode=mode, allow_newlines=allow)

    def thaw(self) -> MutableSpacingPolicy:
        """Return a mutable builder initialized from this frozen policy."""
        return MutableSpacingPolicy(mode=self.mode, allow_newlines=self.allow_newlines)


@dataclass
class MutableSpacingPolicy:
    """Mutable builder for `SpacingPolicy`, merged last-wins.

    Attributes:
        mode (SpacingMode | None): See `SpacingPolicy`. `None` means "inherit".
        allow_newlines (bool | None): See `SpacingPolicy`. `None` means "inherit".
    """

    mode: SpacingMode | None = None
    allow_newlines: bool | None = None

    def merge_with(self, other: MutableSpacingPolicy) -> MutableSpacingPolicy:
        """Return a new builder applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        """
        return MutableSpacingPolicy(
            mode=other.mode if other.mode is not None else self.mode,
            allow_newlines=(
                other.allow_newlines if other.allow_newlines is not None else self.allow_newlines
            ),
        )

    def resolve(self, base: SpacingPolicy) -> SpacingPolicy:
        """Resolve unset fields against ``base`` and return a frozen policy."""
        return SpacingPolicy(
            mode=base.mode if self.mode is None else self.mode,
            allow_newlines=(
                base.allow_newlines if self.allow_newlines is None else self.allow_newlines
            ),
        )

    def freeze(self) -> SpacingPolicy:
        """Freeze to a concrete `SpacingPolicy` using the built-in defaults."""
        return self.resolve(SpacingPolicy())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableSpacingPolicy:
        """Create a builder from a TOML table.

        Unspecified keys become ``None``.

        Raises:
            PolicyError: If ``mode`` is invalid or ``allow_newlines`` is not a boolean.
        """
        if not tbl:
            return cls()

        mode: SpacingMode | None = None
        if "mode" in tbl:
            mode = SpacingMode.parse(tbl["mode"])

        allow: bool | None = None
        if "allow_newlines" in tbl:
            raw = tbl["allow_newlines"]
            if not isinstance(raw, bool):
                raise PolicyError(f"'allow_newlines' must be a boolean, got {raw!r}")
            allow = raw

        return cls(mode=mode, allow_newlines=allow)
