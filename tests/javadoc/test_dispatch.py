# topmark:header:start
#
#   project      : JDocFmt
#   file         : test_dispatch.py
#   file_relpath : tests/javadoc/test_dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for routing tokens to writer operations.

A recording writer stands in for `JavadocWriter` so that each test can check
exactly which writer operation a token produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import pytest

from tests.conftest import mark_javadoc, parametrize
from jdocfmt.javadoc.dispatch import TOKEN_HANDLERS, render
from jdocfmt.javadoc.errors import UnterminatedTokenStreamError
from jdocfmt.javadoc.standardize import STANDARD_BR_TOKEN, STANDARD_P_TOKEN
from jdocfmt.javadoc.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Callable

    from jdocfmt.javadoc.writer import JavadocWriter


class RecordingWriter:
    """Writer double that records ``write_*`` / ``request_*`` calls in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Token | None]] = []

    def __getattr__(self, name: str) -> Callable[..., None]:
        if not name.startswith(("write_", "request_")):
            raise AttributeError(name)

        def _record(*args: Any) -> None:
            self.calls.append((name, args[0] if args else None))

        return _record

    def __str__(self) -> str:
        return "rendered"


def _render(*tokens: Token) -> tuple[str, RecordingWriter]:
    writer = RecordingWriter()
    result: str = render(tokens, cast("JavadocWriter", writer))
    return result, writer


BEGIN: Token = Token(TokenType.BEGIN_JAVADOC, "/**")
END: Token = Token(TokenType.END_JAVADOC, "*/")

# Token kind -> writer operation it must produce (None: the token is dropped).
EXPECTED_OPERATION: dict[TokenType, str | None] = {
    TokenType.FOOTER_JAVADOC_TAG_START: "write_footer_javadoc_tag_start",
    TokenType.SNIPPET_BEGIN: "write_snippet_begin",
    TokenType.SNIPPET_END: "write_snippet_end",
    TokenType.LIST_OPEN_TAG: "write_list_open",
    TokenType.LIST_CLOSE_TAG: "write_list_close",
    TokenType.LIST_ITEM_OPEN_TAG: "write_list_item_open",
    TokenType.HEADER_OPEN_TAG: "write_header_open",
    TokenType.HEADER_CLOSE_TAG: "write_header_close",
    TokenType.BLOCKQUOTE_OPEN_TAG: "write_blockquote_open_or_close",
    TokenType.BLOCKQUOTE_CLOSE_TAG: "write_blockquote_open_or_close",
    TokenType.PRE_OPEN_TAG: "write_pre_open",
    TokenType.PRE_CLOSE_TAG: "write_pre_close",
    TokenType.CODE_OPEN_TAG: "write_code_open",
    TokenType.CODE_CLOSE_TAG: "write_code_close",
    TokenType.TABLE_OPEN_TAG: "write_table_open",
    TokenType.TABLE_CLOSE_TAG: "write_table_close",
    TokenType.MOE_BEGIN_STRIP_COMMENT: "request_moe_begin_strip_comment",
    TokenType.MOE_END_STRIP_COMMENT: "write_moe_end_strip_comment",
    TokenType.HTML_COMMENT: "write_html_comment",
    TokenType.LITERAL: "write_literal",
    TokenType.PARAGRAPH_CLOSE_TAG: None,
    TokenType.LIST_ITEM_CLOSE_TAG: None,
    TokenType.OPTIONAL_LINE_BREAK: None,
}


@mark_javadoc
def test_every_token_type_has_a_handler() -> None:
    """The dispatch table covers the whole token vocabulary."""
    assert set(TOKEN_HANDLERS) == set(TokenType)


@mark_javadoc
@parametrize("token_type, operation", sorted(EXPECTED_OPERATION.items(), key=lambda kv: kv[0].name))
def test_token_kind_maps_to_one_writer_operation(
    token_type: TokenType, operation: str | None
) -> None:
    """Each content token produces at most one writer call, carrying the token."""
    token = Token(token_type, "x")
    result, writer = _render(BEGIN, token, END)

    expected: list[tuple[str, Token | None]] = [("write_begin_javadoc", None)]
    if operation is not None:
        expected.append((operation, token))
    expected.append(("write_end_javadoc", None))

    assert writer.calls == expected
    assert result == "rendered"


@mark_javadoc
def test_tokenless_operations() -> None:
    """Whitespace and forced newlines call writer operations that take no token."""
    _, writer = _render(
        BEGIN,
        Token(TokenType.WHITESPACE, " "),
        Token(TokenType.FORCED_NEWLINE, "\n"),
        END,
    )
    assert writer.calls == [
        ("write_begin_javadoc", None),
        ("request_whitespace", None),
        ("write_line_break_no_auto_indent", None),
        ("write_end_javadoc", None),
    ]


@mark_javadoc
def test_br_is_standardized_before_writing() -> None:
    """A bare ``<BR/>`` reaches the writer as the canonical ``<br>`` token."""
    _, writer = _render(BEGIN, Token(TokenType.BR_TAG, "<BR/>"), END)
    assert writer.calls[1] == ("write_br", STANDARD_BR_TOKEN)


@mark_javadoc
def test_paragraph_open_is_standardized_before_writing() -> None:
    """A bare ``<P >`` reaches the writer as ``<p>``; attributes are kept."""
    _, writer = _render(
        BEGIN,
        Token(TokenType.PARAGRAPH_OPEN_TAG, "<P >"),
        Token(TokenType.PARAGRAPH_OPEN_TAG, '<p class="x">'),
        END,
    )
    assert writer.calls[1] == ("write_paragraph_open", STANDARD_P_TOKEN)
    assert writer.calls[2] == (
        "write_paragraph_open",
        Token(TokenType.PARAGRAPH_OPEN_TAG, '<p class="x">'),
    )


@mark_javadoc
def test_tokens_after_end_are_not_consumed() -> None:
    """Rendering stops at ``END_JAVADOC``."""

    consumed: list[Token] = []

    def _tokens() -> Any:
        for token in (BEGIN, END, Token(TokenType.LITERAL, "after")):
            consumed.append(token)
            yield token

    writer = RecordingWriter()
    render(_tokens(), cast("JavadocWriter", writer))
    assert consumed == [BEGIN, END]
    assert ("write_literal", Token(TokenType.LITERAL, "after")) not in writer.calls


@mark_javadoc
@parametrize(
    "tokens",
    [
        (),
        (BEGIN,),
        (BEGIN, Token(TokenType.LITERAL, "text"), Token(TokenType.WHITESPACE, " ")),
    ],
)
def test_exhausted_stream_is_a_defect(tokens: tuple[Token, ...]) -> None:
    """A stream without ``END_JAVADOC`` raises the dedicated assertion error."""
    writer = RecordingWriter()
    with pytest.raises(UnterminatedTokenStreamError) as excinfo:
        render(tokens, cast("JavadocWriter", writer))

    assert isinstance(excinfo.value, AssertionError)
    assert excinfo.value.consumed == len(tokens)
    assert f"after {len(tokens)} token(s)" in str(excinfo.value)
