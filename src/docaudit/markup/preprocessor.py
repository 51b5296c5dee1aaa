"""Comment removal for AsciiDoc sources.

Two comment forms are recognised:

  • Block comments delimited by a line holding only ``////``
  • Line comments: ``//`` followed by whitespace, or ``//`` alone

Commented-out text must never be mistaken for structure or live links, so
every other component works on the output of :func:`strip_comments`.
"""

from __future__ import annotations

import re

# Delimiters pair lazily from the top; an unpaired delimiter is left alone.
_BLOCK_COMMENT = re.compile(
    r"^////[ \t]*\n.*?^////[ \t]*(?:\n|\Z)",
    re.MULTILINE | re.DOTALL,
)
_LINE_COMMENT = re.compile(r"^//(?:[ \t][^\n]*)?(?:\n|\Z)", re.MULTILINE)


def strip_comments(text: str) -> str:
    """Return *text* with block and line comments removed."""
    text = _BLOCK_COMMENT.sub("", text)
    return _LINE_COMMENT.sub("", text)
