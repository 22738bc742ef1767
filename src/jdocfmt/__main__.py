# topmark:header:start
#
#   project      : JDocFmt
#   file         : __main__.py
#   file_relpath : src/jdocfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JDocFmt via ``python -m jdocfmt``.

Delegates to `jdocfmt.cli.main.cli`, the same Click group behind the
``jdocfmt`` console script.

Examples:
    Format a comment read from STDIN::

        printf '/**\n * Hello.\n */' | python -m jdocfmt format
"""

from __future__ import annotations

from jdocfmt.cli.main import cli

if __name__ == "__main__":
    cli()
