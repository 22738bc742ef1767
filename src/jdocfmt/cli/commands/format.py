# topmark:header:start
#
#   project      : JDocFmt
#   file         : format.py
#   file_relpath : src/jdocfmt/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JDocFmt `format` command.

Reads one Javadoc comment from a file or STDIN and writes the formatted comment
to STDOUT. With ``--check`` nothing is written and the exit code tells whether
formatting would change the input.

Leading indentation of the input is kept in front of the output, and (unless
``--indent`` is given) also used as the comment's block indentation, so an
editor can pipe an indented comment through the command and paste back the
result.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jdocfmt.cli.errors import (
    JdocfmtConfigError,
    JdocfmtEncodingError,
    JdocfmtFileNotFoundError,
    JdocfmtIOError,
    JdocfmtUsageError,
)
from jdocfmt.cli.exit_codes import ExitCode
from jdocfmt.cli.options import common_config_options
from jdocfmt.config import ConfigError, FormatterConfig, discover_config, load_config
from jdocfmt.config.logging import get_logger
from jdocfmt.constants import JAVADOC_CLOSE, JAVADOC_OPEN
from jdocfmt.javadoc import JavadocFormatter

if TYPE_CHECKING:
    from jdocfmt.cli.console import ConsoleLike
    from jdocfmt.config import MutableConfig
    from jdocfmt.config.logging import JdocfmtLogger

logger: JdocfmtLogger = get_logger(__name__)

STDIN_PATH: str = "-"


def read_input(path: Path | None) -> str:
    """Return the text of ``path``, or of STDIN when ``path`` is None or ``-``.

    Raises:
        JdocfmtFileNotFoundError: If ``path`` does not exist.
        JdocfmtEncodingError: If ``path`` is not valid UTF-8.
        JdocfmtIOError: On other read errors.
    """
    if path is None or str(path) == STDIN_PATH:
        with click.open_file(STDIN_PATH) as stream:
            return stream.read()
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise JdocfmtFileNotFoundError(f"No such file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise JdocfmtEncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise JdocfmtIOError(f"Cannot read {path}: {exc}") from exc


def resolve_config(
    path: Path | None,
    *,
    config_path: Path | None,
    max_line_length: int | None,
) -> FormatterConfig:
    """Load settings from ``--config`` or the nearest config file, then apply overrides.

    Raises:
        JdocfmtConfigError: If the settings are unreadable or invalid.
    """
    try:
        if config_path is None:
            start: Path = Path.cwd() if path is None or str(path) == STDIN_PATH else path.parent
            config_path = discover_config(start)
        config: FormatterConfig = load_config(config_path)
        if max_line_length is not None:
            draft: MutableConfig = config.thaw()
            draft.max_line_length = max_line_length
            draft.sources.append("--max-line-length")
            config = draft.freeze()
    except ConfigError as exc:
        raise JdocfmtConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config


def split_comment(text: str) -> tuple[str, str]:
    """Split input into its leading indentation and the bare comment.

    Raises:
        JdocfmtUsageError: If the input is not a single Javadoc comment.
    """
    stripped: str = text.strip()
    prefix: str = text[: len(text) - len(text.lstrip())]
    # Only the indentation of the comment's own line counts.
    prefix = prefix.rsplit("\n", 1)[-1]
    if (
        not stripped.startswith(JAVADOC_OPEN)
        or not stripped.endswith(JAVADOC_CLOSE)
        or len(stripped) <= len(JAVADOC_OPEN) + len(JAVADOC_CLOSE) - 1
    ):
        raise JdocfmtUsageError(
            f"Input must be a Javadoc comment starting with {JAVADOC_OPEN} "
            f"and ending with {JAVADOC_CLOSE}."
        )
    return prefix, stripped


@click.command(
    name="format",
    help="Format one Javadoc comment read from PATH (or STDIN) and print the result.",
)
@click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)
@click.option(
    "--indent",
    "block_indent",
    type=click.IntRange(min=0),
    default=None,
    help="Column at which the comment starts (default: the input's own indentation).",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help=f"Print nothing; exit with {int(ExitCode.WOULD_CHANGE)} if the comment would change.",
)
@common_config_options
def format_command(
    *,
    path: Path | None,
    block_indent: int | None,
    check: bool,
    config_path: Path | None,
    max_line_length: int | None,
) -> None:
    """Format a single Javadoc comment.

    Args:
        path (Path | None): Input file; STDIN when omitted or ``-``.
        block_indent (int | None): Explicit block indentation.
        check (bool): Report instead of printing.
        config_path (Path | None): Explicit config file.
        max_line_length (int | None): Line length override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    text: str = read_input(path)
    prefix, comment = split_comment(text)
    config: FormatterConfig = resolve_config(
        path, config_path=config_path, max_line_length=max_line_length
    )
    indent: int = len(prefix.expandtabs()) if block_indent is None else block_indent

    formatter = JavadocFormatter(config)

    if check:
        if formatter.needs_formatting(comment, indent):
            logger.info("%s would be reformatted", path or "<stdin>")
            ctx.exit(int(ExitCode.WOULD_CHANGE))
        return

    console.print(prefix + formatter.format(comment, indent))
