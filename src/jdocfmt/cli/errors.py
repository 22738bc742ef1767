# topmark:header:start
#
#   project      : JDocFmt
#   file         : errors.py
#   file_relpath : src/jdocfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JDocFmt CLI.

Raise these from commands to exit with a standardized message and exit code.
They prefer the project console if one is present in the Click context (see
`JdocfmtError.show`) and otherwise fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jdocfmt.cli.exit_codes import ExitCode


class JdocfmtError(click.ClickException):
    """Base class for all JDocFmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class JdocfmtUsageError(JdocfmtError):
    """Error for invocation errors (invalid flags/args, input that is not a Javadoc comment)."""

    exit_code = ExitCode.USAGE_ERROR


class JdocfmtConfigError(JdocfmtError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class JdocfmtFileNotFoundError(JdocfmtError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class JdocfmtIOError(JdocfmtError):
    """Error for I/O errors reading input."""

    exit_code = ExitCode.IO_ERROR


class JdocfmtEncodingError(JdocfmtError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
