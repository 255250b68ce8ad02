# topmark:header:start
#
#   project      : CallSpacing
#   file         : file_resolver.py
#   file_relpath : src/callspacing/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for CallSpacing based on config, paths, and filters.

This module expands positional arguments, keeps JavaScript files and applies
include/exclude patterns. Globs are expanded relative to the current working
directory. The result is a deterministic, sorted list of files to process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from callspacing.config.logging import get_logger
from callspacing.constants import DEFAULT_IGNORED_DIRS, JAVASCRIPT_EXTENSIONS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from callspacing.config.logging import CallSpacingLogger
    from callspacing.config.model import Config


logger: CallSpacingLogger = get_logger(__name__)


def is_glob(value: str) -> bool:
    """Return True if ``value`` contains glob metacharacters."""
    return any(ch in value for ch in "*?[")


def is_javascript_file(path: Path) -> bool:
    """Return True if ``path`` has a supported JavaScript extension."""
    return path.suffix.lower() in JAVASCRIPT_EXTENSIONS


def _is_ignored_dir_member(path: Path, root: Path) -> bool:
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = path.parts
    return any(part in DEFAULT_IGNORED_DIRS for part in parts[:-1])


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        rel: Path = path.resolve().relative_to(base.resolve())
        return rel.as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(p: Path) -> list[Path]:
    """Expand a positional argument into candidate files.

    Globs are expanded relative to the current working directory, or from their
    anchor when absolute. Directories are walked recursively (skipping
    ``node_modules`` and ``.git``) and files are kept as is.

    Args:
        p (Path): Positional argument.

    Returns:
        list[Path]: Files found (empty if the path does not exist).
    """
    if is_glob(str(p)):
        if p.is_absolute():
            # Path.glob rejects absolute patterns
            matches = Path(p.anchor).glob(str(p.relative_to(p.anchor)))
        else:
            matches = Path(".").glob(str(p))
        return [m for m in matches if m.is_file()]
    if p.is_dir():
        return [f for f in p.rglob("*") if f.is_file() and not _is_ignored_dir_member(f, p)]
    if p.is_file():
        return [p]
    return []


def find_missing_paths(paths: Iterable[str]) -> list[str]:
    """Return the literal (non-glob) paths that do not exist."""
    return [raw for raw in paths if not is_glob(raw) and not Path(raw).exists()]


def resolve_file_list(config: Config) -> list[Path]:
    """Return the list of input files to process, applying candidate expansion and filters.

    The resolver implements these semantics:
      1. **Candidate set**: Expand positional paths (files, directories recursively,
         and globs). Without positional paths, the current directory is used.
      2. **Extension filter**: Keep files with a supported JavaScript extension.
      3. **Include intersection**: If any include patterns are given, keep only files
         matching *any* of them.
      4. **Exclude subtraction**: Remove files matching any exclude pattern.
      5. Returns a **sorted** list of Path objects for deterministic output.

    Patterns are gitignore-style, matched against paths relative to
    ``config.relative_to`` (the CWD when unset).

    Args:
        config (Config): Configuration values influencing path collection and filters.

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    positional_paths: tuple[str, ...] = tuple(config.files) or (".",)
    workspace_root: Path = config.relative_to or Path.cwd()

    logger.trace(
        "positional_paths: %s include: %s exclude: %s root: %s",
        positional_paths,
        config.include_patterns,
        config.exclude_patterns,
        workspace_root,
    )

    candidate_set: set[Path] = set()
    for raw in positional_paths:
        expanded: list[Path] = expand_path(Path(raw))
        candidate_set.update(expanded)
        if not expanded:
            if is_glob(raw):
                logger.warning("No matches for glob pattern: %s", raw)
            elif not Path(raw).exists():
                logger.warning("No such file or directory: %s", raw)

    candidate_set = {p for p in candidate_set if is_javascript_file(p)}

    if config.include_patterns:
        spec_in: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.include_patterns))
        candidate_set = {
            p for p in candidate_set if spec_in.match_file(_rel_for_match(p, workspace_root))
        }

    if config.exclude_patterns:
        spec_ex: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude_patterns))
        candidate_set = {
            p for p in candidate_set if not spec_ex.match_file(_rel_for_match(p, workspace_root))
        }

    files: list[Path] = sorted(candidate_set)
    logger.debug("Files to process: %d", len(files))
    return files
