# topmark:header:start
#
#   project      : CallSpacing
#   file         : test_policy.py
#   file_relpath : tests/config/test_policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the spacing policy model."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from callspacing.config.policy import (
    MutableSpacingPolicy,
    PolicyError,
    SpacingMode,
    SpacingPolicy,
)


@pytest.mark.parametrize(
    "options, expected",
    [
        (None, SpacingPolicy()),
        ([], SpacingPolicy()),
        (["never"], SpacingPolicy(mode=SpacingMode.NEVER)),
        (["always"], SpacingPolicy(mode=SpacingMode.ALWAYS)),
        (["always", {}], SpacingPolicy(mode=SpacingMode.ALWAYS)),
        (
            ["always", {"allowNewlines": True}],
            SpacingPolicy(mode=SpacingMode.ALWAYS, allow_newlines=True),
        ),
        (["ALWAYS"], SpacingPolicy(mode=SpacingMode.ALWAYS)),
    ],
)
def test_from_options(options: list[Any] | None, expected: SpacingPolicy) -> None:
    assert SpacingPolicy.from_options(options) == expected


@pytest.mark.parametrize(
    "options",
    [
        ["sometimes"],
        [1],
        ["never", {"allowNewlines": True}],
        ["always", {"allowNewlines": "yes"}],
        ["always", {"allowNewLines": True}],
        ["always", {}, {}],
        ["always", True],
    ],
)
def test_from_options_rejects_invalid(options: list[Any]) -> None:
    with pytest.raises(PolicyError):
        SpacingPolicy.from_options(options)


def test_default_policy_is_never() -> None:
    policy = SpacingPolicy()
    assert policy.mode is SpacingMode.NEVER
    assert policy.never
    assert not policy.allow_newlines


def test_never_drops_allow_newlines(caplog: pytest.LogCaptureFixture) -> None:
    """``allow_newlines`` only applies to ``always``; it is dropped with a warning."""
    with caplog.at_level(logging.WARNING):
        policy = SpacingPolicy(mode=SpacingMode.NEVER, allow_newlines=True)
    assert policy.allow_newlines is False
    assert "allow_newlines is ignored" in caplog.text


def test_mutable_policy_merge_is_last_wins() -> None:
    base = MutableSpacingPolicy(mode=SpacingMode.ALWAYS, allow_newlines=True)
    merged = base.merge_with(MutableSpacingPolicy(allow_newlines=False))
    assert merged == MutableSpacingPolicy(mode=SpacingMode.ALWAYS, allow_newlines=False)
    assert base.merge_with(MutableSpacingPolicy()) == base


def test_mutable_policy_freeze_uses_defaults() -> None:
    assert MutableSpacingPolicy().freeze() == SpacingPolicy()
    frozen = MutableSpacingPolicy(mode=SpacingMode.ALWAYS).freeze()
    assert frozen == SpacingPolicy(mode=SpacingMode.ALWAYS)


def test_from_toml_table() -> None:
    draft = MutableSpacingPolicy.from_toml_table({"mode": "always", "allow_newlines": True})
    assert draft == MutableSpacingPolicy(mode=SpacingMode.ALWAYS, allow_newlines=True)
    assert MutableSpacingPolicy.from_toml_table({}) == MutableSpacingPolicy()


@pytest.mark.parametrize(
    "table",
    [{"mode": "sometimes"}, {"allow_newlines": "true"}, {"mode": 3}],
)
def test_toml_table_rejects_invalid(table: dict[str, Any]) -> None:
    with pytest.raises(PolicyError):
        MutableSpacingPolicy.from_toml_table(table)
