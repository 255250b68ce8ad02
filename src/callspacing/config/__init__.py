# topmark:header:start
#
#   project      : CallSpacing
#   file         : __init__.py
#   file_relpath : src/callspacing/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for CallSpacing.

Exposes the immutable `Config` snapshot, its `MutableConfig` builder, the
spacing policy types and the configuration errors.
"""

from __future__ import annotations

from callspacing.config.io import ConfigError
from callspacing.config.model import Config, MutableConfig
from callspacing.config.policy import (
    MutableSpacingPolicy,
    PolicyError,
    SpacingMode,
    SpacingPolicy,
)

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
    "MutableSpacingPolicy",
    "PolicyError",
    "SpacingMode",
    "SpacingPolicy",
]
