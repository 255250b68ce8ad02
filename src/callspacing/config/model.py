# topmark:header:start
#
#   project      : CallSpacing
#   file         : model.py
#   file_relpath : src/callspacing/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the runner.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config`.

Merge order (last wins):
    defaults → discovered project config → ``--config`` files → CLI overrides.

Path semantics:
    - Include/exclude patterns are gitignore-style and matched against paths
      relative to ``relative_to`` (the invocation CWD by default).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from callspacing.config.io import (
    ConfigError,
    discover_config_file,
    get_string_list,
    load_settings,
)
from callspacing.config.logging import get_logger
from callspacing.config.policy import MutableSpacingPolicy, PolicyError, SpacingPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from callspacing.config.logging import CallSpacingLogger

logger: CallSpacingLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        policy (SpacingPolicy): The resolved spacing policy.
        files (tuple[str, ...]): Positional paths (files, directories or globs).
        include_patterns (tuple[str, ...]): Patterns a file must match (any).
        exclude_patterns (tuple[str, ...]): Patterns that drop a file.
        config_files (tuple[Path, ...]): Config files that were merged, in order.
        relative_to (Path | None): Base directory for pattern matching and display.
    """

    policy: SpacingPolicy = field(default_factory=SpacingPolicy)
    files: tuple[str, ...] = ()
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()
    relative_to: Path | None = None


@dataclass
class MutableConfig:
    """Mutable builder for `Config`, merged last-wins."""

    policy: MutableSpacingPolicy = field(default_factory=MutableSpacingPolicy)
    files: list[str] = field(default_factory=lambda: [])
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])
    relative_to: Path | None = None

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder carrying the built-in defaults."""
        return cls(policy=SpacingPolicy().thaw())

    @classmethod
    def from_toml_dict(cls, settings: dict[str, Any], path: Path | None = None) -> MutableConfig:
        """Build a builder from an extracted settings table.

        Args:
            settings (dict[str, Any]): The ``[tool.callspacing]`` (or top-level) table.
            path (Path | None): Source file, used in error messages.

        Raises:
            ConfigError: If a value has the wrong shape.
        """
        try:
            policy = MutableSpacingPolicy.from_toml_table(settings)
        except PolicyError as exc:
            where = f" in '{path}'" if path is not None else ""
            raise ConfigError(f"{exc}{where}", path) from exc
        return cls(
            policy=policy,
            include_patterns=get_string_list(settings, "include", path),
            exclude_patterns=get_string_list(settings, "exclude", path),
            config_files=[path] if path is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a builder from ``path``; ``None`` when the file holds no settings."""
        settings = load_settings(path)
        if settings is None:
            return None
        return cls.from_toml_dict(settings, path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, the discovered project config and explicit config files.

        Args:
            start (Path | None): Directory where discovery starts (CWD by default).
            extra_config_files (Iterable[Path]): Files given with ``--config``.
            no_config (bool): Skip project config discovery.

        Returns:
            MutableConfig: The merged builder (CLI overrides are applied by the caller).
        """
        merged: MutableConfig = cls.from_defaults()
        sources: list[Path] = []
        if not no_config:
            found = discover_config_file(start or Path.cwd())
            if found is not None:
                sources.append(found)
        sources.extend(extra_config_files)

        for source in sources:
            loaded = cls.from_toml_file(source)
            if loaded is None:
                logger.info("No CallSpacing settings in %s", source)
                continue
            merged = merged.merge_with(loaded)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder applying ``other`` over ``self``.

        Scalars and the policy merge last-wins; pattern lists are replaced when
        ``other`` sets any, so a later file can narrow an earlier one.
        """
        return MutableConfig(
            policy=self.policy.merge_with(other.policy),
            files=list(other.files or self.files),
            include_patterns=list(other.include_patterns or self.include_patterns),
            exclude_patterns=list(other.exclude_patterns or self.exclude_patterns),
            config_files=[*self.config_files, *other.config_files],
            relative_to=other.relative_to if other.relative_to is not None else self.relative_to,
        )

    def freeze(self) -> Config:
        """Freeze into an immutable `Config`."""
        config = Config(
            policy=self.policy.freeze(),
            files=tuple(self.files),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
            relative_to=self.relative_to,
        )
        logger.debug("Frozen config: %s", config)
        return config
