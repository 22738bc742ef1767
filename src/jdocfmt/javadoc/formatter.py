# topmark:header:start
#
#   project      : JDocFmt
#   file         : formatter.py
#   file_relpath : src/jdocfmt/javadoc/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for formatting Javadoc.

The formatter itself is stateless. It lexes the comment, lets the dispatcher
translate tokens into calls on a fresh `JavadocWriter`, and finally collapses
the result to a one-liner when possible.

A comment that cannot be lexed is returned unchanged: passing malformed
markup through untouched is preferred over guessing at a partial layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jdocfmt.config.logging import get_logger
from jdocfmt.config.model import FormatterConfig
from jdocfmt.javadoc.collapse import make_single_line_if_possible
from jdocfmt.javadoc.dispatch import render
from jdocfmt.javadoc.errors import LexError
from jdocfmt.javadoc.lexer import lex
from jdocfmt.javadoc.writer import JavadocWriter

if TYPE_CHECKING:
    from jdocfmt.config.logging import JdocfmtLogger
    from jdocfmt.javadoc.tokens import Token

logger: JdocfmtLogger = get_logger(__name__)

_DEFAULT_CONFIG: FormatterConfig = FormatterConfig()


def format_javadoc(
    text: str,
    block_indent: int,
    *,
    config: FormatterConfig | None = None,
) -> str:
    """Format a Javadoc comment.

    Args:
        text (str): The comment; must start with ``/**`` and end with ``*/``.
        block_indent (int): Column at which the comment starts.
        config (FormatterConfig | None): Settings; defaults apply when ``None``.

    Returns:
        str: The formatted comment, with the same delimiters, or ``text``
            itself if it could not be tokenized.

    Raises:
        ValueError: If ``text`` is not delimited by ``/**`` and ``*/``.
        UnterminatedTokenStreamError: If the lexer produced no ``END_JAVADOC``
            token (a defect, never expected).
    """
    cfg: FormatterConfig = config or _DEFAULT_CONFIG
    try:
        tokens: tuple[Token, ...] = lex(text)
    except LexError as exc:
        logger.debug("Leaving javadoc unformatted: %s", exc)
        return text

    writer = JavadocWriter(block_indent, max_line_length=cfg.max_line_length)
    rendered: str = render(tokens, writer)
    return make_single_line_if_possible(
        block_indent, rendered, max_line_length=cfg.max_line_length
    )


class JavadocFormatter:
    """Formatter bound to one `FormatterConfig`.

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self.config: FormatterConfig = config or _DEFAULT_CONFIG

    def format(self, text: str, block_indent: int = 0) -> str:
        """Format ``text``; see `format_javadoc`."""
        return format_javadoc(text, block_indent, config=self.config)

    def needs_formatting(self, text: str, block_indent: int = 0) -> bool:
        """Whether formatting would change ``text``."""
        return self.format(text, block_indent) != text
