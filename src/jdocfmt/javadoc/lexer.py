# topmark:header:start
#
#   project      : JDocFmt
#   file         : lexer.py
#   file_relpath : src/jdocfmt/javadoc/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenizer for Javadoc comments.

`lex` turns the raw text of a ``/** ... */`` comment into an ordered tuple of
`Token` objects that always starts with ``BEGIN_JAVADOC`` and ends with
``END_JAVADOC``. Tokenizing runs in two phases:

1. A scanner walks the text once, recognising newlines (with their ``*``
   gutter), HTML tags the formatter cares about, inline tags (``{@code ...}``)
   and literal text. Inside ``<pre>``, ``<table>``, ``<code>`` and
   ``{@snippet ...}`` existing formatting is preserved: newlines become
   ``FORCED_NEWLINE`` and spaces become literal text.
2. Post-processing passes join adjacent literals, infer ``<p>`` tags from blank
   lines, relax whitespace after ``href=...>`` and de-indent
   ``<pre>{@code ...}</pre>`` blocks.

Unbalanced ``<pre>``, ``<table>``, ``<code>`` or inline-tag braces raise
`LexError`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from jdocfmt.config.logging import get_logger
from jdocfmt.constants import JAVADOC_CLOSE, JAVADOC_OPEN
from jdocfmt.javadoc.errors import LexError
from jdocfmt.javadoc.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jdocfmt.config.logging import JdocfmtLogger

logger: JdocfmtLogger = get_logger(__name__)


def _open_tag_pattern(name_pattern: str) -> re.Pattern[str]:
    return re.compile(rf"<(?:{name_pattern})\b[^>]*>", re.IGNORECASE)


def _close_tag_pattern(name_pattern: str) -> re.Pattern[str]:
    return re.compile(rf"</(?:{name_pattern})\b[^>]*>", re.IGNORECASE)


# All patterns are applied with ``Pattern.match(text, pos)``, which anchors them at ``pos``.
NEWLINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[ \t]*\n[ \t]*[*]?[ \t]?")
# Lowercase only, so that annotations such as @Override in code samples are not block tags.
# "@param <T>" is matched as a whole so that <T> is never taken for an HTML tag.
FOOTER_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"@(?:param\s+<\w+>|[a-z]\w*)")
MOE_BEGIN_STRIP_COMMENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"<!--\s*MOE:begin_intracomment_strip\s*-->"
)
MOE_END_STRIP_COMMENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"<!--\s*MOE:end_intracomment_strip\s*-->"
)
HTML_COMMENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"<!--.*?-->", re.DOTALL)
PRE_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("pre")
PRE_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("pre")
CODE_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("code")
CODE_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("code")
TABLE_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("table")
TABLE_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("table")
LIST_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("ul|ol|dl")
LIST_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("ul|ol|dl")
LIST_ITEM_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("li|dt|dd")
LIST_ITEM_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("li|dt|dd")
HEADER_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("h[1-6]")
HEADER_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("h[1-6]")
PARAGRAPH_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("p")
PARAGRAPH_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("p")
BLOCKQUOTE_OPEN_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("blockquote")
BLOCKQUOTE_CLOSE_PATTERN: Final[re.Pattern[str]] = _close_tag_pattern("blockquote")
BR_PATTERN: Final[re.Pattern[str]] = _open_tag_pattern("br")
SNIPPET_TAG_OPEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[{]@snippet\b")
INLINE_TAG_OPEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[{]@\w*")
# Stops before characters that may start another token; split words are rejoined later.
LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r".[^ \t\n@<{}*]*", re.DOTALL)

HREF_PATTERN: Final[re.Pattern[str]] = re.compile(r"href=[^>]*>")
PRE_CODE_OPEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[ \t]*[{]@code")

# Tags recognised only outside preserved regions, in matching order.
_SIMPLE_HTML_TAGS: Final[tuple[tuple[re.Pattern[str], TokenType], ...]] = (
    (PARAGRAPH_OPEN_PATTERN, TokenType.PARAGRAPH_OPEN_TAG),
    (PARAGRAPH_CLOSE_PATTERN, TokenType.PARAGRAPH_CLOSE_TAG),
    (LIST_OPEN_PATTERN, TokenType.LIST_OPEN_TAG),
    (LIST_CLOSE_PATTERN, TokenType.LIST_CLOSE_TAG),
    (LIST_ITEM_OPEN_PATTERN, TokenType.LIST_ITEM_OPEN_TAG),
    (LIST_ITEM_CLOSE_PATTERN, TokenType.LIST_ITEM_CLOSE_TAG),
    (BLOCKQUOTE_OPEN_PATTERN, TokenType.BLOCKQUOTE_OPEN_TAG),
    (BLOCKQUOTE_CLOSE_PATTERN, TokenType.BLOCKQUOTE_CLOSE_TAG),
    (HEADER_OPEN_PATTERN, TokenType.HEADER_OPEN_TAG),
    (HEADER_CLOSE_PATTERN, TokenType.HEADER_CLOSE_TAG),
    (BR_PATTERN, TokenType.BR_TAG),
    (MOE_BEGIN_STRIP_COMMENT_PATTERN, TokenType.MOE_BEGIN_STRIP_COMMENT),
    (MOE_END_STRIP_COMMENT_PATTERN, TokenType.MOE_END_STRIP_COMMENT),
    (HTML_COMMENT_PATTERN, TokenType.HTML_COMMENT),
)


def lex(text: str) -> tuple[Token, ...]:
    """Tokenize a Javadoc comment.

    Args:
        text (str): The full comment, starting with ``/**`` and ending with ``*/``.

    Returns:
        tuple[Token, ...]: Tokens in source order, from ``BEGIN_JAVADOC`` to ``END_JAVADOC``.

    Raises:
        ValueError: If ``text`` is not delimited by ``/**`` and ``*/``.
        LexError: If tags or inline-tag braces are unbalanced.
    """
    body: str = _strip_javadoc_begin_and_end(text)
    body = body.replace("\r\n", "\n").replace("\r", "\n")
    tokens: list[Token] = _JavadocScanner(body).generate_tokens()

    tokens = _join_adjacent_literals_and_adjacent_whitespace(tokens)
    tokens = _infer_paragraph_tags(tokens)
    tokens = _optionalize_spaces_after_links(tokens)
    tokens = _deindent_pre_code_blocks(tokens)
    logger.trace("lexed %d token(s)", len(tokens))
    return tuple(tokens)


def _strip_javadoc_begin_and_end(text: str) -> str:
    # Done up front so the scanner never has to avoid swallowing the delimiters.
    if not text.startswith(JAVADOC_OPEN):
        raise ValueError(f"Missing {JAVADOC_OPEN}: {text!r}")
    if not text.endswith(JAVADOC_CLOSE) or len(text) <= 4:
        raise ValueError(f"Missing {JAVADOC_CLOSE}: {text!r}")
    return text[len(JAVADOC_OPEN) : -len(JAVADOC_CLOSE)]


class _JavadocScanner:
    """Single-pass scanner producing raw tokens for the comment body."""

    def __init__(self, body: str) -> None:
        self._text: str = body
        self._pos: int = 0
        self._brace_depth: int = 0
        self._pre_depth: int = 0
        self._code_depth: int = 0
        self._table_depth: int = 0
        self._outer_inline_tag_is_snippet: bool = False
        self._something_since_newline: bool = False

    def generate_tokens(self) -> list[Token]:
        tokens: list[Token] = [Token(TokenType.BEGIN_JAVADOC, JAVADOC_OPEN)]
        while self._pos < len(self._text):
            start: int = self._pos
            token_type: TokenType = self._consume_token()
            tokens.append(Token(token_type, self._text[start : self._pos]))
        self._check_matching_tags()
        tokens.append(Token(TokenType.END_JAVADOC, JAVADOC_CLOSE))
        return tokens

    def _try_consume(self, pattern: re.Pattern[str]) -> bool:
        match: re.Match[str] | None = pattern.match(self._text, self._pos)
        if match is None:
            return False
        self._pos = match.end()
        return True

    def _try_consume_str(self, expected: str) -> bool:
        if not self._text.startswith(expected, self._pos):
            return False
        self._pos += len(expected)
        return True

    def _consume_literal(self) -> None:
        # Always matches: the pattern accepts any single character.
        self._try_consume(LITERAL_PATTERN)

    def _preserve_existing_formatting(self) -> bool:
        return (
            self._pre_depth > 0
            or self._table_depth > 0
            or self._code_depth > 0
            or self._outer_inline_tag_is_snippet
        )

    def _check_matching_tags(self) -> None:
        if self._brace_depth > 0:
            raise LexError(f"unclosed inline tag at offset {self._pos}")
        if self._pre_depth > 0:
            raise LexError(f"unclosed <pre> at offset {self._pos}")
        if self._table_depth > 0:
            raise LexError(f"unclosed <table> at offset {self._pos}")
        if self._code_depth > 0:
            raise LexError(f"unclosed <code> at offset {self._pos}")

    def _consume_token(self) -> TokenType:
        if self._try_consume(NEWLINE_PATTERN):
            self._something_since_newline = False
            if self._preserve_existing_formatting():
                return TokenType.FORCED_NEWLINE
            return TokenType.WHITESPACE
        if self._try_consume_str(" ") or self._try_consume_str("\t"):
            if self._preserve_existing_formatting():
                return TokenType.LITERAL
            return TokenType.WHITESPACE

        if not self._something_since_newline and self._try_consume(FOOTER_TAG_PATTERN):
            self._check_matching_tags()
            self._something_since_newline = True
            return TokenType.FOOTER_JAVADOC_TAG_START
        self._something_since_newline = True

        brace_token: TokenType | None = self._consume_brace()
        if brace_token is not None:
            return brace_token

        # Inside an inline tag, no HTML interpretation.
        if self._brace_depth > 0:
            self._consume_literal()
            return TokenType.LITERAL

        preserved_token: TokenType | None = self._consume_preserving_tag()
        if preserved_token is not None:
            return preserved_token

        if self._preserve_existing_formatting():
            self._consume_literal()
            return TokenType.LITERAL

        for pattern, token_type in _SIMPLE_HTML_TAGS:
            if self._try_consume(pattern):
                return token_type

        self._consume_literal()
        return TokenType.LITERAL

    def _consume_brace(self) -> TokenType | None:
        if self._try_consume(SNIPPET_TAG_OPEN_PATTERN):
            self._brace_depth += 1
            if self._brace_depth == 1:
                self._outer_inline_tag_is_snippet = True
                return TokenType.SNIPPET_BEGIN
            return TokenType.LITERAL
        if self._try_consume(INLINE_TAG_OPEN_PATTERN):
            self._brace_depth += 1
            return TokenType.LITERAL
        if self._try_consume_str("{"):
            if self._brace_depth > 0:
                self._brace_depth += 1
            return TokenType.LITERAL
        if self._try_consume_str("}"):
            if self._outer_inline_tag_is_snippet and self._brace_depth == 1:
                self._brace_depth = 0
                self._outer_inline_tag_is_snippet = False
                return TokenType.SNIPPET_END
            if self._brace_depth > 0:
                self._brace_depth -= 1
            return TokenType.LITERAL
        return None

    def _consume_preserving_tag(self) -> TokenType | None:
        """Consume ``<pre>``, ``<code>`` or ``<table>`` (open or close) if present.

        Nested inside another preserved region, these tags are plain literals.
        """
        if self._try_consume(PRE_OPEN_PATTERN):
            preserve: bool = self._preserve_existing_formatting()
            self._pre_depth += 1
            return TokenType.LITERAL if preserve else TokenType.PRE_OPEN_TAG
        if self._try_consume(PRE_CLOSE_PATTERN):
            if self._pre_depth > 0:
                self._pre_depth -= 1
            return TokenType.LITERAL if self._preserve_existing_formatting() else TokenType.PRE_CLOSE_TAG

        if self._try_consume(CODE_OPEN_PATTERN):
            preserve = self._preserve_existing_formatting()
            self._code_depth += 1
            return TokenType.LITERAL if preserve else TokenType.CODE_OPEN_TAG
        if self._try_consume(CODE_CLOSE_PATTERN):
            if self._code_depth > 0:
                self._code_depth -= 1
            return (
                TokenType.LITERAL if self._preserve_existing_formatting() else TokenType.CODE_CLOSE_TAG
            )

        if self._try_consume(TABLE_OPEN_PATTERN):
            preserve = self._preserve_existing_formatting()
            self._table_depth += 1
            return TokenType.LITERAL if preserve else TokenType.TABLE_OPEN_TAG
        if self._try_consume(TABLE_CLOSE_PATTERN):
            if self._table_depth > 0:
                self._table_depth -= 1
            return (
                TokenType.LITERAL if self._preserve_existing_formatting() else TokenType.TABLE_CLOSE_TAG
            )
        return None


# --- post-processing passes ---
#
# Every pass receives a list ending with END_JAVADOC, so looking one token ahead of a
# non-final token never runs off the end.


def _join_adjacent_literals_and_adjacent_whitespace(tokens: Sequence[Token]) -> list[Token]:
    """Merge runs of literals, and the whitespace that follows them.

    Whitespace between a literal run and a literal starting with ``@`` is folded
    into the run, so that no output line can start with a stray ``@``.
    """
    output: list[Token] = []
    accumulated: list[str] = []
    i: int = 0
    while i < len(tokens):
        token: Token = tokens[i]
        if token.type is TokenType.LITERAL:
            accumulated.append(token.value)
            i += 1
            continue

        if not accumulated:
            output.append(token)
            i += 1
            continue

        seen_whitespace: list[str] = []
        while tokens[i].type is TokenType.WHITESPACE:
            seen_whitespace.append(tokens[i].value)
            i += 1

        if tokens[i].type is TokenType.LITERAL and tokens[i].value.startswith("@"):
            accumulated.append(" ")
            accumulated.append(tokens[i].value)
            i += 1
            continue

        output.append(Token(TokenType.LITERAL, "".join(accumulated)))
        accumulated = []

        if seen_whitespace:
            output.append(Token(TokenType.WHITESPACE, "".join(seen_whitespace)))
        # tokens[i] is handled by the next iteration.

    return output


def _infer_paragraph_tags(tokens: Sequence[Token]) -> list[Token]:
    """Insert ``<p>`` between two literals separated by a blank line."""
    output: list[Token] = []
    i: int = 0
    while i < len(tokens):
        token: Token = tokens[i]
        output.append(token)
        i += 1
        if token.type is not TokenType.LITERAL:
            continue

        following: Token = tokens[i]
        if following.type is TokenType.WHITESPACE and following.value.count("\n") > 1:
            output.append(following)
            i += 1
            if tokens[i].type is TokenType.LITERAL:
                output.append(Token(TokenType.PARAGRAPH_OPEN_TAG, "<p>"))
    return output


def _optionalize_spaces_after_links(tokens: Sequence[Token]) -> list[Token]:
    """Turn whitespace right after ``href=...>`` into an optional line break."""
    output: list[Token] = []
    i: int = 0
    while i < len(tokens):
        token: Token = tokens[i]
        output.append(token)
        i += 1
        if token.type is TokenType.LITERAL and HREF_PATTERN.fullmatch(token.value):
            following: Token = tokens[i]
            if following.type is TokenType.WHITESPACE:
                output.append(Token(TokenType.OPTIONAL_LINE_BREAK, following.value))
                i += 1
    return output


def _deindent_pre_code_blocks(tokens: Sequence[Token]) -> list[Token]:
    """Remove common indentation from ``<pre>{@code ...}</pre>`` blocks.

    The ``{@code`` opener stays on the ``<pre>`` line and the closing ``}`` moves
    to its own line, directly followed by ``</pre>``.
    """
    output: list[Token] = []
    i: int = 0
    while i < len(tokens):
        token: Token = tokens[i]
        output.append(token)
        i += 1
        if token.type is not TokenType.PRE_OPEN_TAG:
            continue

        j: int = i
        while tokens[j].type is TokenType.FORCED_NEWLINE:
            j += 1
        opener: Token = tokens[j]
        if opener.type is not TokenType.LITERAL or not PRE_CODE_OPEN_PATTERN.fullmatch(
            opener.value
        ):
            continue

        end: int = j + 1
        while tokens[end].type not in (TokenType.PRE_CLOSE_TAG, TokenType.END_JAVADOC):
            end += 1
        output.append(Token(TokenType.LITERAL, opener.value.strip()))
        output.extend(_deindent_code_lines(tokens[j + 1 : end]))
        i = end
    return output


def _deindent_code_lines(body: Sequence[Token]) -> list[Token]:
    lines: list[list[Token]] = [[]]
    for token in body:
        if token.type is TokenType.FORCED_NEWLINE:
            lines.append([])
        else:
            lines[-1].append(token)

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        return []

    # Move the closing brace of {@code to a line of its own.
    trailing_brace: bool = False
    last: Token = lines[-1][-1]
    if last.type is TokenType.LITERAL and last.value.endswith("}"):
        trailing_brace = True
        rest: str = last.value[:-1]
        if rest.strip():
            lines[-1][-1] = Token(TokenType.LITERAL, rest.rstrip())
        else:
            lines[-1].pop()
            if not lines[-1]:
                lines.pop()

    def _indent(line: list[Token]) -> int | None:
        if not line or line[0].type is not TokenType.LITERAL or not line[0].value.strip():
            return None
        value: str = line[0].value
        return len(value) - len(value.lstrip(" \t"))

    indents: list[int] = [n for n in (_indent(line) for line in lines) if n is not None]
    min_indent: int = min(indents, default=0)

    output: list[Token] = []
    for line in lines:
        output.append(Token(TokenType.FORCED_NEWLINE, "\n"))
        if not line:
            continue
        first: Token = line[0]
        if first.type is TokenType.LITERAL:
            stripped: str = first.value[min_indent:] if first.value.strip() else ""
            if stripped:
                output.append(Token(TokenType.LITERAL, stripped))
            output.extend(line[1:])
        else:
            output.extend(line)
    output.append(Token(TokenType.FORCED_NEWLINE, "\n"))
    if trailing_brace:
        output.append(Token(TokenType.LITERAL, "}"))
    return output
