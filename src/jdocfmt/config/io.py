# topmark:header:start
#
#   project      : JDocFmt
#   file         : io.py
#   file_relpath : src/jdocfmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load JDocFmt configuration from TOML files.

Two file shapes are recognised:

- ``jdocfmt.toml``: settings under a ``[jdocfmt]`` table, or at top level;
- ``pyproject.toml``: settings under ``[tool.jdocfmt]``.

Parsing is done with `tomlkit`; values are unwrapped to plain Python objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jdocfmt.config.logging import get_logger
from jdocfmt.config.model import ConfigError, FormatterConfig, MutableConfig
from jdocfmt.constants import CONFIG_TABLE_NAME, JDOCFMT_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from jdocfmt.config.logging import JdocfmtLogger

logger: JdocfmtLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    return doc.unwrap()


def extract_jdocfmt_table(path: Path, doc: dict[str, Any]) -> dict[str, Any] | None:
    """Return the jdocfmt settings table of a parsed document, if any.

    Args:
        path (Path): Path the document was read from (its name selects the layout).
        doc (dict[str, Any]): Parsed TOML document.

    Returns:
        dict[str, Any] | None: The settings table, or ``None`` when the document has none.

    Raises:
        ConfigError: If the settings entry exists but is not a table.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool: Any = doc.get("tool", {})
        table: Any = tool.get(CONFIG_TABLE_NAME) if isinstance(tool, dict) else None
    else:
        table = doc.get(CONFIG_TABLE_NAME, doc)

    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [{CONFIG_TABLE_NAME}] must be a table")
    return table


def load_config(path: Path | None = None) -> FormatterConfig:
    """Build a `FormatterConfig` from defaults and, optionally, one TOML file.

    Args:
        path (Path | None): ``jdocfmt.toml`` or ``pyproject.toml`` to read.

    Returns:
        FormatterConfig: The frozen configuration.

    Raises:
        ConfigError: If the file is unreadable or holds invalid settings.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if path is not None:
        table: dict[str, Any] | None = extract_jdocfmt_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [%s] settings in %s; using defaults", CONFIG_TABLE_NAME, path)
        else:
            draft.merge_toml_table(table, source=str(path))
    return draft.freeze()


def discover_config(start: Path) -> Path | None:
    """Find the nearest config file at or above ``start``.

    In each directory ``jdocfmt.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.jdocfmt]`` table, and
    one that cannot be parsed is logged and skipped.

    Args:
        start (Path): Directory (or file, whose parent is used) to search from.

    Returns:
        Path | None: The config file, or ``None`` if there is none.
    """
    here: Path = start.resolve()
    if not here.is_dir():
        here = here.parent
    for directory in (here, *here.parents):
        candidate: Path = directory / JDOCFMT_TOML_NAME
        if candidate.is_file():
            logger.debug("Using config file %s", candidate)
            return candidate
        candidate = directory / PYPROJECT_TOML_NAME
        if candidate.is_file() and _has_jdocfmt_table(candidate):
            logger.debug("Using config file %s", candidate)
            return candidate
    return None


def _has_jdocfmt_table(pyproject: Path) -> bool:
    # A pyproject.toml may belong to an unrelated project; a broken one is skipped.
    try:
        return extract_jdocfmt_table(pyproject, load_toml_dict(pyproject)) is not None
    except ConfigError as exc:
        logger.warning("Skipping unreadable %s: %s", pyproject, exc)
        return False
