# topmark:header:start
#
#   project      : JDocFmt
#   file         : constants.py
#   file_relpath : src/jdocfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JDocFmt Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    JDOCFMT_VERSION: str = get_version("jdocfmt")
except PackageNotFoundError:  # running from a source checkout
    JDOCFMT_VERSION = "0.0.0"

MAX_LINE_LENGTH: int = 100

JAVADOC_OPEN: str = "/**"
JAVADOC_CLOSE: str = "*/"

# Config file names, in lookup order within a directory.
JDOCFMT_TOML_NAME: str = "jdocfmt.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Table holding our settings inside pyproject.toml ([tool.jdocfmt]) and jdocfmt.toml ([jdocfmt]).
CONFIG_TABLE_NAME: str = "jdocfmt"
