# topmark:header:start
#
#   project      : JDocFmt
#   file         : main.py
#   file_relpath : src/jdocfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the JDocFmt CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the console from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jdocfmt.cli.commands.format import format_command
from jdocfmt.cli.commands.version import version_command
from jdocfmt.cli.console import ClickConsole
from jdocfmt.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from jdocfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from jdocfmt.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    # JDOCFMT_LOG_LEVEL wins over -v/-q so that logs can be raised without touching scripts.
    level: int = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="JDocFmt: canonical formatting for Javadoc comments.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the JDocFmt CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'jdocfmt format [PATH]' to format a comment.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(format_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
