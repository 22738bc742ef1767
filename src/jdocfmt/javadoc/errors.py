# topmark:header:start
#
#   project      : JDocFmt
#   file         : errors.py
#   file_relpath : src/jdocfmt/javadoc/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Javadoc formatting core.

Two failure classes exist:

- `LexError` is *expected*: malformed markup makes the lexer give up, and the
  formatter answers by returning the comment unchanged.
- `UnterminatedTokenStreamError` is a *defect*: a token stream without its
  closing ``END_JAVADOC`` token means lexer and dispatcher disagree about their
  contract. It derives from `AssertionError` and must never be caught inside
  the package.
"""

from __future__ import annotations


class LexError(Exception):
    """Raised when a Javadoc comment cannot be tokenized (e.g. an unclosed ``<pre>``)."""


class UnterminatedTokenStreamError(AssertionError):
    """Raised when a token stream ends without an ``END_JAVADOC`` token."""

    def __init__(self, consumed: int) -> None:
        super().__init__(
            f"token stream exhausted after {consumed} token(s) without END_JAVADOC"
        )
        self.consumed: int = consumed
