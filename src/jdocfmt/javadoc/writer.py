# topmark:header:start
#
#   project      : JDocFmt
#   file         : writer.py
#   file_relpath : src/jdocfmt/javadoc/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stateful output buffer for formatted Javadoc.

The writer receives two kinds of calls from the dispatcher:

- *requests* (``request_whitespace``, ``request_moe_begin_strip_comment``) record
  what should separate the previous token from the next one; nothing is written
  until the next token arrives, and the strongest pending request wins;
- *writes* (``write_*``) emit a token, first honoring any pending request and
  wrapping the line when the token would not fit.

Output lines look like::

    /**
     * Text wrapped at the line limit.
     *
     * <p>Next paragraph.
     */

where every line after the first is prefixed by ``block_indent + 1`` spaces.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Final

from jdocfmt.constants import MAX_LINE_LENGTH
from jdocfmt.javadoc.tokens import Token, TokenType


@total_ordering
class RequestedWhitespace(Enum):
    """Whitespace requested between the previous and the next token.

    Members are ordered from weakest to strongest: when a token requests a
    `NEWLINE` after it and the next one requests a `BLANK_LINE` before it, the
    blank line wins.
    """

    NONE = 0
    WHITESPACE = 1
    NEWLINE = 2
    BLANK_LINE = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RequestedWhitespace):
            return NotImplemented
        return self.value < other.value


class AutoIndent(Enum):
    """Whether a newline re-applies the list/footer indentation."""

    AUTO_INDENT = "auto_indent"
    NO_AUTO_INDENT = "no_auto_indent"


# Tokens after which the line still counts as "just started" (no wrap before the next word).
START_OF_LINE_TOKENS: Final[frozenset[TokenType]] = frozenset(
    {
        TokenType.LIST_ITEM_OPEN_TAG,
        TokenType.PARAGRAPH_OPEN_TAG,
        TokenType.HEADER_OPEN_TAG,
    }
)


class _NestingCounter:
    """Non-negative counter used to track list nesting."""

    def __init__(self) -> None:
        self._value: int = 0

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> None:
        self._value += 1

    def decrement_if_positive(self) -> None:
        if self._value > 0:
            self._value -= 1

    def is_positive(self) -> bool:
        return self._value > 0

    def reset(self) -> None:
        self._value = 0


class JavadocWriter:
    """Accumulates formatted Javadoc text, one token at a time.

    Args:
        block_indent (int): Column of the ``/**`` that opens the comment.
        max_line_length (int): Maximum width of an output line, indentation included.
    """

    def __init__(self, block_indent: int, *, max_line_length: int = MAX_LINE_LENGTH) -> None:
        self.block_indent: int = block_indent
        self.max_line_length: int = max_line_length
        self._output: list[str] = []

        # Whether we are inside an <li> of the innermost list (and not inside a nested list
        # of that <li>).
        self._continuing_list_item_of_innermost_list: bool = False
        self._continuing_footer_tag: bool = False
        self._continuing_list_item_count = _NestingCounter()
        self._continuing_list_count = _NestingCounter()

        self._remaining_on_line: int = 0
        self._at_start_of_line: bool = False
        self._requested_whitespace: RequestedWhitespace = RequestedWhitespace.NONE
        self._requested_moe_begin_strip_comment: Token | None = None
        self._indent_for_moe_end_strip_comment: int = 0
        self._wrote_anything_significant: bool = False

    def __str__(self) -> str:
        return "".join(self._output)

    # --- requests ---

    def request_whitespace(self) -> None:
        """Request a space before the next token.

        The request may be dropped (at the start of a line) or overridden by a
        stronger request such as a newline.
        """
        self._request(RequestedWhitespace.WHITESPACE)

    def request_moe_begin_strip_comment(self, token: Token) -> None:
        """Queue a strip-begin marker so it lands after any requested whitespace."""
        self._requested_moe_begin_strip_comment = token

    # --- writes ---

    def write_begin_javadoc(self) -> None:
        self._append_tracking_length("/**")
        self._write_newline()

    def write_end_javadoc(self) -> None:
        self._output.append("\n")
        self._append_spaces(self.block_indent + 1)
        self._output.append("*/")

    def write_footer_javadoc_tag_start(self, token: Token) -> None:
        """Write a block tag such as ``@param``, closing any dangling list state."""
        # Close any unclosed lists (e.g., <li> without <ul>).
        self._continuing_list_item_of_innermost_list = False
        self._continuing_list_item_count.reset()
        self._continuing_list_count.reset()

        if not self._wrote_anything_significant:
            # Javadoc consisting solely of tags.
            pass
        elif not self._continuing_footer_tag:
            # First footer tag after the body.
            self._request_blank_line()
        else:
            # Subsequent footer tag.
            self._continuing_footer_tag = False
            self._request_newline()

        self._write_token(token)
        self._continuing_footer_tag = True

    def write_snippet_begin(self, token: Token) -> None:
        self._request_blank_line()
        self._write_token(token)

    def write_snippet_end(self, token: Token) -> None:
        self._write_token(token)
        self._request_blank_line()

    def write_list_open(self, token: Token) -> None:
        self._request_blank_line()

        self._write_token(token)
        self._continuing_list_item_of_innermost_list = False
        self._continuing_list_count.increment()

        self._request_newline()

    def write_list_close(self, token: Token) -> None:
        self._request_newline()

        self._continuing_list_item_count.decrement_if_positive()
        self._continuing_list_count.decrement_if_positive()
        self._write_token(token)

        self._request_blank_line()

    def write_list_item_open(self, token: Token) -> None:
        self._request_newline()

        if self._continuing_list_item_of_innermost_list:
            self._continuing_list_item_of_innermost_list = False
            self._continuing_list_item_count.decrement_if_positive()
        self._write_token(token)
        self._continuing_list_item_of_innermost_list = True
        self._continuing_list_item_count.increment()

    def write_header_open(self, token: Token) -> None:
        self._request_blank_line()
        self._write_token(token)

    def write_header_close(self, token: Token) -> None:
        self._write_token(token)
        self._request_blank_line()

    def write_paragraph_open(self, token: Token) -> None:
        """Write ``<p>`` after a blank line, or drop it if nothing was written yet."""
        if not self._wrote_anything_significant:
            # A leading <p> is redundant; also skip the blank line it would request.
            return

        self._request_blank_line()
        self._write_token(token)

    def write_blockquote_open_or_close(self, token: Token) -> None:
        self._request_blank_line()
        self._write_token(token)
        self._request_blank_line()

    def write_pre_open(self, token: Token) -> None:
        self._request_blank_line()
        self._write_token(token)

    def write_pre_close(self, token: Token) -> None:
        self._write_token(token)
        self._request_blank_line()

    def write_code_open(self, token: Token) -> None:
        self._write_token(token)

    def write_code_close(self, token: Token) -> None:
        self._write_token(token)

    def write_table_open(self, token: Token) -> None:
        self._request_blank_line()
        self._write_token(token)

    def write_table_close(self, token: Token) -> None:
        self._write_token(token)
        self._request_blank_line()

    def write_moe_end_strip_comment(self, token: Token) -> None:
        self.write_line_break_no_auto_indent()
        self._append_spaces(self._indent_for_moe_end_strip_comment)

        self._write_token(token)

        self._request_newline()

    def write_html_comment(self, token: Token) -> None:
        self._request_newline()
        self._write_token(token)
        self._request_newline()

    def write_br(self, token: Token) -> None:
        self._write_token(token)
        self._request_newline()

    def write_line_break_no_auto_indent(self) -> None:
        """Break the line now, ignoring list/footer indentation (used inside ``<pre>``)."""
        self._write_newline(AutoIndent.NO_AUTO_INDENT)

    def write_literal(self, token: Token) -> None:
        self._write_token(token)

    # --- internals ---

    def _request_blank_line(self) -> None:
        self._request(RequestedWhitespace.BLANK_LINE)

    def _request_newline(self) -> None:
        self._request(RequestedWhitespace.NEWLINE)

    def _request(self, requested: RequestedWhitespace) -> None:
        self._requested_whitespace = max(requested, self._requested_whitespace)

    def _write_token(self, token: Token) -> None:
        if self._requested_moe_begin_strip_comment is not None:
            self._request_newline()

        if self._requested_whitespace is RequestedWhitespace.BLANK_LINE and (
            self._continuing_list_count.is_positive() or self._continuing_footer_tag
        ):
            # No blank lines within list items or footer tags: there are none between them either.
            self._requested_whitespace = RequestedWhitespace.NEWLINE

        if not self._wrote_anything_significant and self._at_start_of_line:
            # The line opened by write_begin_javadoc is still empty.
            self._requested_whitespace = min(
                self._requested_whitespace, RequestedWhitespace.WHITESPACE
            )

        if self._requested_whitespace is RequestedWhitespace.BLANK_LINE:
            self._write_blank_line()
            self._requested_whitespace = RequestedWhitespace.NONE
        elif self._requested_whitespace is RequestedWhitespace.NEWLINE:
            self._write_newline()
            self._requested_whitespace = RequestedWhitespace.NONE
        need_whitespace: bool = self._requested_whitespace is RequestedWhitespace.WHITESPACE

        # Wrapping at the start of a line would not make the token fit.
        if not self._at_start_of_line and len(token) + int(need_whitespace) > self._remaining_on_line:
            self._write_newline()
        if not self._at_start_of_line and need_whitespace:
            self._output.append(" ")
            self._remaining_on_line -= 1

        moe_begin: Token | None = self._requested_moe_begin_strip_comment
        if moe_begin is not None:
            self._output.append(moe_begin.value)
            self._requested_moe_begin_strip_comment = None
            self._indent_for_moe_end_strip_comment = self._inner_indent()
            # The marker counts as content: the newline after it must not be downgraded.
            self._at_start_of_line = False
            self._wrote_anything_significant = True
            self._requested_whitespace = RequestedWhitespace.NEWLINE
            self._write_token(token)
            return

        self._output.append(token.value)

        if token.type not in START_OF_LINE_TOKENS:
            self._at_start_of_line = False

        self._remaining_on_line -= len(token)
        self._requested_whitespace = RequestedWhitespace.NONE
        self._wrote_anything_significant = True

    def _write_blank_line(self) -> None:
        self._output.append("\n")
        self._append_spaces(self.block_indent + 1)
        self._output.append("*")
        self._write_newline()

    def _write_newline(self, auto_indent: AutoIndent = AutoIndent.AUTO_INDENT) -> None:
        self._output.append("\n")
        self._append_spaces(self.block_indent + 1)
        self._output.append("* ")
        self._remaining_on_line = self.max_line_length - self.block_indent - 3
        if auto_indent is AutoIndent.AUTO_INDENT:
            inner: int = self._inner_indent()
            self._append_spaces(inner)
            self._remaining_on_line -= inner
        self._at_start_of_line = True

    def _inner_indent(self) -> int:
        inner: int = (
            self._continuing_list_item_count.value * 4 + self._continuing_list_count.value * 2
        )
        if self._continuing_footer_tag:
            inner += 4
        return inner

    def _append_spaces(self, count: int) -> None:
        self._output.append(" " * count)

    def _append_tracking_length(self, text: str) -> None:
        self._output.append(text)
        self._remaining_on_line -= len(text)
