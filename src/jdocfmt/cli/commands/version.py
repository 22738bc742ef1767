# topmark:header:start
#
#   project      : JDocFmt
#   file         : version.py
#   file_relpath : src/jdocfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JDocFmt `version` command.

Prints the JDocFmt version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jdocfmt.constants import JDOCFMT_VERSION

if TYPE_CHECKING:
    from jdocfmt.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of JDocFmt.",
)
def version_command() -> None:
    """Show the current version of JDocFmt."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(f"jdocfmt {JDOCFMT_VERSION}")
