# topmark:header:start
#
#   project      : JDocFmt
#   file         : standardize.py
#   file_relpath : src/jdocfmt/javadoc/standardize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical spellings for ``<br>`` and ``<p>`` tokens.

``<BR/>``, ``<br />`` and ``<br>`` all mean the same thing; the formatter emits
one spelling. Tags carrying attributes (``<p class="x">``) are left alone.
"""

from __future__ import annotations

import re
from typing import Final

from jdocfmt.javadoc.tokens import Token, TokenType

STANDARD_BR_TOKEN: Final[Token] = Token(TokenType.BR_TAG, "<br>")
STANDARD_P_TOKEN: Final[Token] = Token(TokenType.PARAGRAPH_OPEN_TAG, "<p>")

SIMPLE_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"<\w+\s*/?\s*>", re.IGNORECASE)


def standardize(token: Token, standard_token: Token) -> Token:
    """Return ``standard_token`` if ``token`` is a bare tag, else ``token`` itself.

    Args:
        token (Token): The token as lexed.
        standard_token (Token): The canonical token to substitute.

    Returns:
        Token: ``standard_token`` when the whole value is ``<name>`` or
            ``<name/>`` (any case, any inner whitespace), otherwise ``token``.
    """
    return standard_token if SIMPLE_TAG_PATTERN.fullmatch(token.value) else token


def standardize_br_token(token: Token) -> Token:
    """Standardize a ``BR_TAG`` token to ``<br>``."""
    return standardize(token, STANDARD_BR_TOKEN)


def standardize_p_token(token: Token) -> Token:
    """Standardize a ``PARAGRAPH_OPEN_TAG`` token to ``<p>``."""
    return standardize(token, STANDARD_P_TOKEN)
