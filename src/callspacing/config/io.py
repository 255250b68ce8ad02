# topmark:header:start
#
#   project      : CallSpacing
#   file         : io.py
#   file_relpath : src/callspacing/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration is read from:
- ``callspacing.toml`` (settings live in the top-level table), and
- ``pyproject.toml`` (settings live under ``[tool.callspacing]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from callspacing.config.logging import get_logger
from callspacing.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_KEY

if TYPE_CHECKING:
    from callspacing.config.logging import CallSpacingLogger

logger: CallSpacingLogger = get_logger(__name__)

TomlTable = dict[str, Any]

KNOWN_KEYS: frozenset[str] = frozenset({"mode", "allow_newlines", "include", "exclude"})


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is malformed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def load_toml_dict(path: Path) -> TomlTable:
    """Parse a TOML file into a plain Python dict.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The unwrapped TOML document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}", path) from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in '{path}': {exc}", path) from exc
    return doc.unwrap()


def extract_settings(path: Path, doc: TomlTable) -> TomlTable | None:
    """Return the CallSpacing settings table held by ``doc``.

    For ``pyproject.toml`` the table lives under ``[tool.callspacing]`` and
    ``None`` is returned when that section is absent. Any other file is taken
    as a dedicated config file whose top-level table holds the settings.
    """
    if path.name == PYPROJECT_FILE_NAME:
        tool = doc.get("tool")
        if not isinstance(tool, dict):
            return None
        section = tool.get(PYPROJECT_TOOL_KEY)
        if section is None:
            return None
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TOOL_KEY}] in '{path}' must be a table", path)
        settings: TomlTable = section
    else:
        settings = doc

    for key in sorted(set(settings) - KNOWN_KEYS):
        logger.warning("Ignoring unknown config key '%s' in %s", key, path)
    return settings


def load_settings(path: Path) -> TomlTable | None:
    """Load and extract the settings table from a config file."""
    logger.debug("Loading config from %s", path)
    return extract_settings(path, load_toml_dict(path))


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file walking up from ``start``.

    In each directory ``callspacing.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it carries a ``[tool.callspacing]`` table.

    Args:
        start (Path): Directory where discovery starts.

    Returns:
        Path | None: The config file to use, if any.
    """
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                settings = extract_settings(pyproject, load_toml_dict(pyproject))
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                continue
            if settings is not None:
                logger.debug("Discovered config in %s", pyproject)
                return pyproject
    return None


def get_string_list(tbl: TomlTable, key: str, path: Path | None = None) -> list[str]:
    """Return ``tbl[key]`` as a list of strings (empty when absent).

    Raises:
        ConfigError: If the value is not a string or a list of strings.
    """
    value = tbl.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigError(f"'{key}' must be a string or a list of strings", path)
