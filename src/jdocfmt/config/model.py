# topmark:header:start
#
#   project      : JDocFmt
#   file         : model.py
#   file_relpath : src/jdocfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter configuration model.

The configuration follows a mutable/immutable split:

- `MutableConfig` is a builder: start from `MutableConfig.from_defaults`,
  layer TOML tables with `MutableConfig.merge_toml_table`, then `freeze`.
- `FormatterConfig` is the frozen result handed to the formatter. Use
  `FormatterConfig.thaw` to derive a modified copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jdocfmt.config.logging import get_logger
from jdocfmt.constants import MAX_LINE_LENGTH

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jdocfmt.config.logging import JdocfmtLogger

logger: JdocfmtLogger = get_logger(__name__)

# Key names as written in TOML.
KEY_MAX_LINE_LENGTH: str = "max-line-length"
KNOWN_KEYS: frozenset[str] = frozenset({KEY_MAX_LINE_LENGTH})

# Shortest line that still holds "/**  */" plus one content character.
MIN_LINE_LENGTH: int = len("/**  */") + 1


class ConfigError(Exception):
    """Raised for unreadable, malformed or invalid configuration."""


@dataclass(frozen=True)
class FormatterConfig:
    """Immutable formatter settings.

    Attributes:
        max_line_length (int): Maximum width of a source line, indentation included.
        sources (tuple[str, ...]): Where the settings came from, for diagnostics.
    """

    max_line_length: int = MAX_LINE_LENGTH
    sources: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(max_line_length=self.max_line_length, sources=list(self.sources))


@dataclass
class MutableConfig:
    """Mutable builder for `FormatterConfig`."""

    max_line_length: int = MAX_LINE_LENGTH
    sources: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def merge_toml_table(self, table: Mapping[str, Any], *, source: str) -> MutableConfig:
        """Apply the keys of a ``[jdocfmt]`` table on top of the current values.

        Unknown keys are logged and ignored.

        Args:
            table (Mapping[str, Any]): Parsed TOML table.
            source (str): Human-readable origin (usually a file path).

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a known key holds an invalid value.
        """
        for key, value in table.items():
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", key, source)
                continue
            if key == KEY_MAX_LINE_LENGTH:
                self.max_line_length = _validate_max_line_length(value, source=source)
        self.sources.append(source)
        return self

    def freeze(self) -> FormatterConfig:
        """Validate and return the immutable configuration.

        Raises:
            ConfigError: If a value is out of range.
        """
        _validate_max_line_length(self.max_line_length, source="<config>")
        return FormatterConfig(max_line_length=self.max_line_length, sources=tuple(self.sources))


def _validate_max_line_length(value: object, *, source: str) -> int:
    # bool is an int subclass; `max-line-length = true` is a mistake, not 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{source}: {KEY_MAX_LINE_LENGTH} must be an integer, got {value!r}")
    if value < MIN_LINE_LENGTH:
        raise ConfigError(
            f"{source}: {KEY_MAX_LINE_LENGTH} must be at least {MIN_LINE_LENGTH}, got {value}"
        )
    return int(value)
