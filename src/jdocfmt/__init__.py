# topmark:header:start
#
#   project      : JDocFmt
#   file         : __init__.py
#   file_relpath : src/jdocfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JDocFmt package.

JDocFmt rewrites Javadoc comments into a canonical layout: text is re-wrapped at
the line limit, HTML block tags get their own lines, ``<br>`` and ``<p>`` are
spelled one way, and comments with a single short line become one-liners.
"""

from __future__ import annotations

from jdocfmt.javadoc import JavadocFormatter, format_javadoc

__all__ = ["JavadocFormatter", "format_javadoc"]
