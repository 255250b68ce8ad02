# topmark:header:start
#
#   project      : CallSpacing
#   file         : config_resolver.py
#   file_relpath : src/callspacing/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the CallSpacing configuration from Click parameters.

Resolution order (lowest → highest precedence):
  1. Built-in defaults.
  2. Discovered project config (nearest ``callspacing.toml`` or
     ``pyproject.toml`` with ``[tool.callspacing]``), unless ``--no-config``.
  3. Explicit ``--config`` files, merged in order.
  4. CLI overrides (flags/args), applied last.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from callspacing.cli.errors import CallSpacingConfigError
from callspacing.config import ConfigError, MutableConfig, MutableSpacingPolicy
from callspacing.config.logging import get_logger

if TYPE_CHECKING:
    from callspacing.config import Config, SpacingMode
    from callspacing.config.logging import CallSpacingLogger

logger: CallSpacingLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    files: list[str],
    config_paths: list[str],
    no_config: bool,
    mode: SpacingMode | None,
    allow_newlines: bool | None,
    include_patterns: list[str],
    exclude_patterns: list[str],
) -> Config:
    """Build the runtime `Config` from Click parameters.

    Args:
        files (list[str]): Positional paths.
        config_paths (list[str]): Files given with ``--config``.
        no_config (bool): Skip project config discovery.
        mode (SpacingMode | None): ``--mode`` override.
        allow_newlines (bool | None): ``--allow-newlines`` override.
        include_patterns (list[str]): ``--include`` patterns.
        exclude_patterns (list[str]): ``--exclude`` patterns.

    Returns:
        Config: The frozen configuration.

    Raises:
        CallSpacingConfigError: If a config file is missing, unreadable or invalid.
    """
    extra: list[Path] = []
    for entry in config_paths:
        p = Path(entry)
        if not p.is_file():
            raise CallSpacingConfigError(f"Config file not found: {p}")
        extra.append(p)

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=Path.cwd(),
            extra_config_files=extra,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise CallSpacingConfigError(str(exc)) from exc

    overrides = MutableConfig(
        policy=MutableSpacingPolicy(mode=mode, allow_newlines=allow_newlines),
        files=list(files),
        include_patterns=list(include_patterns),
        exclude_patterns=list(exclude_patterns),
        relative_to=Path.cwd(),
    )
    draft = draft.merge_with(overrides)
    logger.trace("Merged config draft: %s", draft)
    return draft.freeze()
