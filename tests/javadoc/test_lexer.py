# topmark:header:start
#
#   project      : JDocFmt
#   file         : test_lexer.py
#   file_relpath : tests/javadoc/test_lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Javadoc tokenizer and its post-processing passes."""

from __future__ import annotations

import pytest

from tests.conftest import mark_javadoc, parametrize
from jdocfmt.javadoc.errors import LexError
from jdocfmt.javadoc.lexer import lex
from jdocfmt.javadoc.tokens import Token, TokenType

T = TokenType


def _types(text: str) -> list[TokenType]:
    return [token.type for token in lex(text)]


@mark_javadoc
def test_simple_sentence() -> None:
    """Words and spaces become literals and whitespace between the delimiters."""
    assert lex("/** Hello world. */") == (
        Token(T.BEGIN_JAVADOC, "/**"),
        Token(T.WHITESPACE, " "),
        Token(T.LITERAL, "Hello"),
        Token(T.WHITESPACE, " "),
        Token(T.LITERAL, "world."),
        Token(T.WHITESPACE, " "),
        Token(T.END_JAVADOC, "*/"),
    )


@mark_javadoc
def test_gutter_is_part_of_whitespace() -> None:
    """Newlines swallow the leading ``*`` gutter of the next line."""
    tokens: tuple[Token, ...] = lex("/**\n * One\n * two\n */")
    assert [t.value for t in tokens if t.type is T.LITERAL] == ["One", "two"]
    assert not any("*" in t.value for t in tokens if t.type is T.LITERAL)


@mark_javadoc
def test_crlf_is_normalized() -> None:
    """Windows line endings lex exactly like ``\\n``."""
    assert lex("/**\r\n * a\r\n */") == lex("/**\n * a\n */")


@mark_javadoc
def test_blank_line_between_literals_infers_paragraph() -> None:
    """A blank line between two text runs introduces ``<p>``."""
    assert _types("/**\n * First.\n *\n * Second.\n */") == [
        T.BEGIN_JAVADOC,
        T.WHITESPACE,
        T.LITERAL,
        T.WHITESPACE,
        T.PARAGRAPH_OPEN_TAG,
        T.LITERAL,
        T.WHITESPACE,
        T.END_JAVADOC,
    ]


@mark_javadoc
def test_single_newline_does_not_infer_paragraph() -> None:
    """Only blank lines separate paragraphs."""
    assert T.PARAGRAPH_OPEN_TAG not in _types("/**\n * First.\n * Second.\n */")


@mark_javadoc
def test_html_tags() -> None:
    """Block-level tags are recognized case-insensitively."""
    types: list[TokenType] = _types("/** <UL><li>a</li></ul><h2>H</h2><blockquote>q</blockquote> */")
    assert types == [
        T.BEGIN_JAVADOC,
        T.WHITESPACE,
        T.LIST_OPEN_TAG,
        T.LIST_ITEM_OPEN_TAG,
        T.LITERAL,
        T.LIST_ITEM_CLOSE_TAG,
        T.LIST_CLOSE_TAG,
        T.HEADER_OPEN_TAG,
        T.LITERAL,
        T.HEADER_CLOSE_TAG,
        T.BLOCKQUOTE_OPEN_TAG,
        T.LITERAL,
        T.BLOCKQUOTE_CLOSE_TAG,
        T.WHITESPACE,
        T.END_JAVADOC,
    ]


@mark_javadoc
def test_footer_tag_at_start_of_line() -> None:
    """Block tags are recognized only at the start of a line."""
    tokens: tuple[Token, ...] = lex("/**\n * Summary.\n * @return the value\n */")
    assert Token(T.FOOTER_JAVADOC_TAG_START, "@return") in tokens


@mark_javadoc
def test_at_sign_mid_line_is_literal() -> None:
    """``@`` after text on the same line joins the preceding literal."""
    tokens: tuple[Token, ...] = lex("/** write foo @bar here */")
    assert T.FOOTER_JAVADOC_TAG_START not in [t.type for t in tokens]
    assert Token(T.LITERAL, "foo @bar") in tokens


@mark_javadoc
def test_email_address_stays_one_literal() -> None:
    assert Token(T.LITERAL, "me@example.com") in lex("/** mail me@example.com */")


@mark_javadoc
def test_type_parameter_footer_tag() -> None:
    """``@param <T>`` is one token; ``<T>`` is not HTML."""
    tokens: tuple[Token, ...] = lex("/** @param <T> the type */")
    assert tokens[2] == Token(T.FOOTER_JAVADOC_TAG_START, "@param <T>")


@mark_javadoc
def test_capitalized_annotation_is_not_a_footer_tag() -> None:
    assert T.FOOTER_JAVADOC_TAG_START not in _types("/** @Override */")


@mark_javadoc
def test_pre_preserves_newlines_and_spaces() -> None:
    """Inside ``<pre>`` line breaks are forced and spaces are literal text."""
    tokens: tuple[Token, ...] = lex("/**\n * <pre>\n * a  b\n * </pre>\n */")
    types: list[TokenType] = [t.type for t in tokens]

    assert T.PRE_OPEN_TAG in types
    assert T.PRE_CLOSE_TAG in types
    assert types.count(T.FORCED_NEWLINE) == 2
    assert Token(T.LITERAL, "a  b") in tokens


@mark_javadoc
def test_inline_tag_suppresses_html() -> None:
    """HTML inside ``{@code ...}`` stays literal text."""
    tokens: tuple[Token, ...] = lex("/** {@code <p>} */")
    assert T.PARAGRAPH_OPEN_TAG not in [t.type for t in tokens]
    assert Token(T.LITERAL, "<p>}") in tokens


@mark_javadoc
def test_snippet_tokens() -> None:
    """``{@snippet ...}`` is bracketed by dedicated tokens and keeps its lines."""
    types: list[TokenType] = _types("/** {@snippet :\n * foo()\n * } */")
    assert types[2] is T.SNIPPET_BEGIN
    assert T.SNIPPET_END in types
    assert types.index(T.SNIPPET_END) > types.index(T.FORCED_NEWLINE)


@mark_javadoc
def test_whitespace_after_link_is_optional() -> None:
    """Whitespace directly after ``href=...>`` becomes an optional break."""
    tokens: tuple[Token, ...] = lex('/** <a href="x"> link</a> */')
    index: int = tokens.index(Token(T.LITERAL, 'href="x">'))
    assert tokens[index + 1].type is T.OPTIONAL_LINE_BREAK


@mark_javadoc
def test_pre_code_block_is_deindented() -> None:
    """Common indentation is removed and the closing brace gets its own line."""
    tokens: tuple[Token, ...] = lex(
        "/**\n * <pre>{@code\n *     int x = 1;\n *       y();\n * }</pre>\n */"
    )
    start: int = [t.type for t in tokens].index(T.PRE_OPEN_TAG)
    end: int = [t.type for t in tokens].index(T.PRE_CLOSE_TAG)
    assert list(tokens[start + 1 : end]) == [
        Token(T.LITERAL, "{@code"),
        Token(T.FORCED_NEWLINE, "\n"),
        Token(T.LITERAL, "int x = 1;"),
        Token(T.FORCED_NEWLINE, "\n"),
        Token(T.LITERAL, "  y();"),
        Token(T.FORCED_NEWLINE, "\n"),
        Token(T.LITERAL, "}"),
    ]


@mark_javadoc
@parametrize(
    "text",
    [
        "/** <pre>x */",
        "/** <table><tr><td>x */",
        "/** <code>x */",
        "/** {@code x */",
        "/** {@link Foo#bar( */",
    ],
)
def test_unbalanced_markup_raises(text: str) -> None:
    with pytest.raises(LexError):
        lex(text)


@mark_javadoc
@parametrize("text", ["/* plain */", "/** no close", "/**/", "", "// line"])
def test_missing_delimiters_raise_value_error(text: str) -> None:
    with pytest.raises(ValueError):
        lex(text)


@mark_javadoc
@parametrize(
    "text",
    ["/** */", "/** Hello */", "/**\n * <ul><li>x</ul>\n */", "/** @param a b */"],
)
def test_stream_is_delimited(text: str) -> None:
    """Every token sequence starts with BEGIN_JAVADOC and ends with END_JAVADOC."""
    types: list[TokenType] = _types(text)
    assert types[0] is T.BEGIN_JAVADOC
    assert types[-1] is T.END_JAVADOC
    assert types.count(T.END_JAVADOC) == 1
