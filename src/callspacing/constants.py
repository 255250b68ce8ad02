# topmark:header:start
#
#   project      : CallSpacing
#   file         : constants.py
#   file_relpath : src/callspacing/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallSpacing Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version


def _package_version() -> str:
    try:
        return get_version("callspacing")
    except PackageNotFoundError:
        return "0.0.0"


CALLSPACING_VERSION: str = _package_version()

RULE_ID: str = "function-call-spacing"

CONFIG_FILE_NAME: str = "callspacing.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_KEY: str = "callspacing"

# A fix run stops once no edit applies or after this many passes.
MAX_FIX_PASSES: int = 10

JAVASCRIPT_EXTENSIONS: frozenset[str] = frozenset({".js", ".mjs", ".cjs", ".jsx"})

UTF8_BOM: str = "\ufeff"

# Directories never traversed when expanding directory arguments.
DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset({"node_modules", ".git"})
