# topmark:header:start
#
#   project      : JDocFmt
#   file         : __init__.py
#   file_relpath : src/jdocfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for JDocFmt: settings model, TOML loading and logging setup."""

from __future__ import annotations

from jdocfmt.config.io import discover_config, load_config
from jdocfmt.config.model import ConfigError, FormatterConfig, MutableConfig

__all__ = [
    "ConfigError",
    "FormatterConfig",
    "MutableConfig",
    "discover_config",
    "load_config",
]
