# topmark:header:start
#
#   project      : CallSpacing
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and config discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from callspacing.config.io import (
    ConfigError,
    discover_config_file,
    get_string_list,
    load_settings,
    load_toml_dict,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict(tmp_path: Path) -> None:
    path = tmp_path / "callspacing.toml"
    path.write_text('mode = "always"\ninclude = ["src/"]\n', encoding="utf-8")
    assert load_toml_dict(path) == {"mode": "always", "include": ["src/"]}


def test_load_toml_dict_invalid(tmp_path: Path) -> None:
    path = tmp_path / "callspacing.toml"
    path.write_text("mode = \n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_toml_dict(path)
    assert excinfo.value.path == path


def test_load_toml_dict_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_toml_dict(tmp_path / "nope.toml")


def test_load_settings_from_pyproject(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.callspacing]\nmode = "always"\n', encoding="utf-8"
    )
    assert load_settings(path) == {"mode": "always"}


def test_load_settings_pyproject_without_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_settings(path) is None


def test_load_settings_pyproject_section_must_be_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool]\ncallspacing = "always"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_discovery_prefers_dedicated_file(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.callspacing]\nmode = "never"\n', encoding="utf-8"
    )
    (tmp_path / "callspacing.toml").write_text('mode = "always"\n', encoding="utf-8")
    assert discover_config_file(tmp_path) == (tmp_path / "callspacing.toml").resolve()


def test_discovery_walks_up(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.callspacing]\nmode = "always"\n', encoding="utf-8"
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "pyproject.toml").resolve()


def test_discovery_skips_pyproject_without_section(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    (tmp_path / "callspacing.toml").write_text('mode = "always"\n', encoding="utf-8")
    assert discover_config_file(project) == (tmp_path / "callspacing.toml").resolve()


def test_get_string_list() -> None:
    assert get_string_list({}, "include") == []
    assert get_string_list({"include": "src/"}, "include") == ["src/"]
    assert get_string_list({"include": ["a", "b"]}, "include") == ["a", "b"]
    with pytest.raises(ConfigError):
        get_string_list({"include": [1]}, "include")
