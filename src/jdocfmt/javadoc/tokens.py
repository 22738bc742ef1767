# topmark:header:start
#
#   project      : JDocFmt
#   file         : tokens.py
#   file_relpath : src/jdocfmt/javadoc/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token model shared by the Javadoc lexer, dispatcher and writer.

A `Token` is an immutable ``(type, value)`` pair. Tokens are produced once by
the lexer, in source order, and are never mutated afterwards: later stages may
only decide to *substitute* a token (see `jdocfmt.javadoc.standardize`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Closed set of token kinds produced by the lexer.

    Members:
        BEGIN_JAVADOC: The opening ``/**``.
        END_JAVADOC: The closing ``*/``; always the last token.
        FOOTER_JAVADOC_TAG_START: A block tag such as ``@param`` at line start.
        LIST_OPEN_TAG: ``<ul>``, ``<ol>`` or ``<dl>``.
        LIST_CLOSE_TAG: ``</ul>``, ``</ol>`` or ``</dl>``.
        LIST_ITEM_OPEN_TAG: ``<li>``, ``<dt>`` or ``<dd>``.
        LIST_ITEM_CLOSE_TAG: ``</li>``, ``</dt>`` or ``</dd>``.
        HEADER_OPEN_TAG: ``<h1>`` … ``<h6>``.
        HEADER_CLOSE_TAG: ``</h1>`` … ``</h6>``.
        PARAGRAPH_OPEN_TAG: ``<p>``, written or inferred from a blank line.
        PARAGRAPH_CLOSE_TAG: ``</p>``.
        PRE_OPEN_TAG: ``<pre>``.
        PRE_CLOSE_TAG: ``</pre>``.
        CODE_OPEN_TAG: ``<code>``.
        CODE_CLOSE_TAG: ``</code>``.
        TABLE_OPEN_TAG: ``<table>``.
        TABLE_CLOSE_TAG: ``</table>``.
        BLOCKQUOTE_OPEN_TAG: ``<blockquote>``.
        BLOCKQUOTE_CLOSE_TAG: ``</blockquote>``.
        SNIPPET_BEGIN: The outermost ``{@snippet`` inline tag opener.
        SNIPPET_END: The brace closing the outermost ``{@snippet``.
        MOE_BEGIN_STRIP_COMMENT: ``<!-- MOE:begin_intracomment_strip -->``.
        MOE_END_STRIP_COMMENT: ``<!-- MOE:end_intracomment_strip -->``.
        HTML_COMMENT: Any other ``<!-- ... -->``.
        BR_TAG: ``<br>`` in any spelling.
        WHITESPACE: Breakable whitespace, including newlines outside ``<pre>``.
        FORCED_NEWLINE: A newline whose position must be preserved.
        OPTIONAL_LINE_BREAK: Whitespace after a link where a break is allowed.
        LITERAL: Any other text.
    """

    BEGIN_JAVADOC = "begin_javadoc"
    END_JAVADOC = "end_javadoc"
    FOOTER_JAVADOC_TAG_START = "footer_javadoc_tag_start"
    LIST_OPEN_TAG = "list_open_tag"
    LIST_CLOSE_TAG = "list_close_tag"
    LIST_ITEM_OPEN_TAG = "list_item_open_tag"
    LIST_ITEM_CLOSE_TAG = "list_item_close_tag"
    HEADER_OPEN_TAG = "header_open_tag"
    HEADER_CLOSE_TAG = "header_close_tag"
    PARAGRAPH_OPEN_TAG = "paragraph_open_tag"
    PARAGRAPH_CLOSE_TAG = "paragraph_close_tag"
    PRE_OPEN_TAG = "pre_open_tag"
    PRE_CLOSE_TAG = "pre_close_tag"
    CODE_OPEN_TAG = "code_open_tag"
    CODE_CLOSE_TAG = "code_close_tag"
    TABLE_OPEN_TAG = "table_open_tag"
    TABLE_CLOSE_TAG = "table_close_tag"
    BLOCKQUOTE_OPEN_TAG = "blockquote_open_tag"
    BLOCKQUOTE_CLOSE_TAG = "blockquote_close_tag"
    SNIPPET_BEGIN = "snippet_begin"
    SNIPPET_END = "snippet_end"
    MOE_BEGIN_STRIP_COMMENT = "moe_begin_strip_comment"
    MOE_END_STRIP_COMMENT = "moe_end_strip_comment"
    HTML_COMMENT = "html_comment"
    BR_TAG = "br_tag"
    WHITESPACE = "whitespace"
    FORCED_NEWLINE = "forced_newline"
    OPTIONAL_LINE_BREAK = "optional_line_break"
    LITERAL = "literal"


@dataclass(frozen=True)
class Token:
    """A single lexed unit of a Javadoc comment.

    Attributes:
        type (TokenType): Kind of the token.
        value (str): The exact text the token stands for.
    """

    type: TokenType
    value: str

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"
