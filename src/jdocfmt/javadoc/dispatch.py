# topmark:header:start
#
#   project      : JDocFmt
#   file         : dispatch.py
#   file_relpath : src/jdocfmt/javadoc/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Route lexed tokens to writer operations.

`render` reads the token sequence once and performs exactly one writer call per
token, chosen from `TOKEN_HANDLERS`, a table keyed by `TokenType`. The
dispatcher keeps no state of its own: the writer owns the output buffer, and
``request_*`` calls queue deferred whitespace on it rather than writing.

Rendering ends at the ``END_JAVADOC`` token, which is the only normal exit. A
sequence that runs out before it violates the lexer's contract and raises
`UnterminatedTokenStreamError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from jdocfmt.javadoc.errors import UnterminatedTokenStreamError
from jdocfmt.javadoc.standardize import standardize_br_token, standardize_p_token
from jdocfmt.javadoc.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from jdocfmt.javadoc.writer import JavadocWriter

    TokenHandler = Callable[[JavadocWriter, Token], None]


def _ignore(_writer: JavadocWriter, _token: Token) -> None:
    """Tokens that exist for symmetry only (``</p>``, ``</li>``, optional breaks)."""


TOKEN_HANDLERS: Final[Mapping[TokenType, TokenHandler]] = {
    TokenType.BEGIN_JAVADOC: lambda w, _t: w.write_begin_javadoc(),
    TokenType.END_JAVADOC: lambda w, _t: w.write_end_javadoc(),
    TokenType.FOOTER_JAVADOC_TAG_START: lambda w, t: w.write_footer_javadoc_tag_start(t),
    TokenType.SNIPPET_BEGIN: lambda w, t: w.write_snippet_begin(t),
    TokenType.SNIPPET_END: lambda w, t: w.write_snippet_end(t),
    TokenType.LIST_OPEN_TAG: lambda w, t: w.write_list_open(t),
    TokenType.LIST_CLOSE_TAG: lambda w, t: w.write_list_close(t),
    TokenType.LIST_ITEM_OPEN_TAG: lambda w, t: w.write_list_item_open(t),
    TokenType.HEADER_OPEN_TAG: lambda w, t: w.write_header_open(t),
    TokenType.HEADER_CLOSE_TAG: lambda w, t: w.write_header_close(t),
    TokenType.PARAGRAPH_OPEN_TAG: lambda w, t: w.write_paragraph_open(standardize_p_token(t)),
    TokenType.BLOCKQUOTE_OPEN_TAG: lambda w, t: w.write_blockquote_open_or_close(t),
    TokenType.BLOCKQUOTE_CLOSE_TAG: lambda w, t: w.write_blockquote_open_or_close(t),
    TokenType.PRE_OPEN_TAG: lambda w, t: w.write_pre_open(t),
    TokenType.PRE_CLOSE_TAG: lambda w, t: w.write_pre_close(t),
    TokenType.CODE_OPEN_TAG: lambda w, t: w.write_code_open(t),
    TokenType.CODE_CLOSE_TAG: lambda w, t: w.write_code_close(t),
    TokenType.TABLE_OPEN_TAG: lambda w, t: w.write_table_open(t),
    TokenType.TABLE_CLOSE_TAG: lambda w, t: w.write_table_close(t),
    TokenType.MOE_BEGIN_STRIP_COMMENT: lambda w, t: w.request_moe_begin_strip_comment(t),
    TokenType.MOE_END_STRIP_COMMENT: lambda w, t: w.write_moe_end_strip_comment(t),
    TokenType.HTML_COMMENT: lambda w, t: w.write_html_comment(t),
    TokenType.BR_TAG: lambda w, t: w.write_br(standardize_br_token(t)),
    TokenType.WHITESPACE: lambda w, _t: w.request_whitespace(),
    TokenType.FORCED_NEWLINE: lambda w, _t: w.write_line_break_no_auto_indent(),
    TokenType.LITERAL: lambda w, t: w.write_literal(t),
    TokenType.PARAGRAPH_CLOSE_TAG: _ignore,
    TokenType.LIST_ITEM_CLOSE_TAG: _ignore,
    TokenType.OPTIONAL_LINE_BREAK: _ignore,
}

_unhandled: frozenset[TokenType] = frozenset(TokenType).difference(TOKEN_HANDLERS)
if _unhandled:  # pragma: no cover - guards edits to TokenType
    raise RuntimeError(f"no handler for token type(s): {sorted(t.name for t in _unhandled)}")


def render(tokens: Iterable[Token], writer: JavadocWriter) -> str:
    """Feed ``tokens`` to ``writer`` and return the rendered comment.

    Args:
        tokens (Iterable[Token]): Lexed tokens, ending with ``END_JAVADOC``.
        writer (JavadocWriter): A fresh writer; it is mutated by this call.

    Returns:
        str: The writer's text as of the ``END_JAVADOC`` token.

    Raises:
        UnterminatedTokenStreamError: If ``tokens`` contains no ``END_JAVADOC``.
    """
    consumed: int = 0
    for token in tokens:
        consumed += 1
        TOKEN_HANDLERS[token.type](writer, token)
        if token.type is TokenType.END_JAVADOC:
            return str(writer)
    raise UnterminatedTokenStreamError(consumed)
