# topmark:header:start
#
#   project      : JDocFmt
#   file         : __init__.py
#   file_relpath : src/jdocfmt/javadoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Javadoc formatting core.

Data flows one way: raw comment text → tokens (`lexer`) → writer calls
(`dispatch`, `writer`) → rendered text → optional one-line collapse
(`collapse`). `formatter` ties the stages together.
"""

from __future__ import annotations

from jdocfmt.javadoc.errors import LexError, UnterminatedTokenStreamError
from jdocfmt.javadoc.formatter import JavadocFormatter, format_javadoc
from jdocfmt.javadoc.tokens import Token, TokenType

__all__ = [
    "JavadocFormatter",
    "LexError",
    "Token",
    "TokenType",
    "UnterminatedTokenStreamError",
    "format_javadoc",
]
