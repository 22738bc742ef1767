# topmark:header:start
#
#   project      : JDocFmt
#   file         : collapse.py
#   file_relpath : src/jdocfmt/javadoc/collapse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collapse a rendered Javadoc comment to a single line when it fits.

Only comments with exactly one content line are candidates::

    /**
     * Tests for foos.
     */

becomes ``/** Tests for foos. */`` if that fits within the line length at the
comment's block indentation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from jdocfmt.config.logging import get_logger
from jdocfmt.constants import MAX_LINE_LENGTH

if TYPE_CHECKING:
    from jdocfmt.config.logging import JdocfmtLogger

logger: JdocfmtLogger = get_logger(__name__)

ONE_CONTENT_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r" */[*][*]\n *[*] (.*)\n *[*]/")

EMPTY_JAVADOC: Final[str] = "/** */"
ONE_LINER_DELIMITERS: Final[str] = "/**  */"

# Tag conventionally used on its own; other tag-only comments stay multi-line so that
# someone adds a summary sentence.
STANDALONE_TAG: Final[str] = "@hide"


def make_single_line_if_possible(
    block_indent: int,
    text: str,
    *,
    max_line_length: int = MAX_LINE_LENGTH,
) -> str:
    """Return ``text`` or a one-line version of it (e.g. ``/** Tests for foos. */``).

    Args:
        block_indent (int): Column of the comment's ``/**``.
        text (str): Rendered comment, as produced by the dispatcher.
        max_line_length (int): Maximum width of a source line.

    Returns:
        str: ``"/** */"`` for an empty comment, ``"/** <line> */"`` when the single
            content line may be collapsed, otherwise ``text`` unchanged.
    """
    match: re.Match[str] | None = ONE_CONTENT_LINE_PATTERN.fullmatch(text)
    if match is None:
        return text

    line: str = match.group(1)
    if not line:
        return EMPTY_JAVADOC
    if one_line_javadoc(line, block_indent, max_line_length=max_line_length):
        return f"/** {line} */"
    return text


def one_line_javadoc(
    line: str,
    block_indent: int,
    *,
    max_line_length: int = MAX_LINE_LENGTH,
) -> bool:
    """Whether ``line`` may be written as ``/** <line> */`` at ``block_indent``."""
    one_liner_content_length: int = max_line_length - len(ONE_LINER_DELIMITERS) - block_indent
    if len(line) > one_liner_content_length:
        logger.trace(
            "keeping multi-line javadoc: %d chars exceed budget of %d",
            len(line),
            one_liner_content_length,
        )
        return False
    if line.startswith("@") and line != STANDALONE_TAG:
        logger.trace("keeping multi-line javadoc: content is a bare tag %r", line)
        return False
    return True
