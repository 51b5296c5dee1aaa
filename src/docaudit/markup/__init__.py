"""Lightweight AsciiDoc markup handling.

Targeted line-oriented pattern matching only: comments are stripped and the
few constructs the rules need are extracted, nothing more.
"""

from docaudit.markup.classifier import classify
from docaudit.markup.elements import (
    Heading,
    has_steps,
    iter_attributes,
    iter_headings,
    iter_ids,
)
from docaudit.markup.preprocessor import strip_comments

__all__ = [
    "Heading",
    "classify",
    "has_steps",
    "iter_attributes",
    "iter_headings",
    "iter_ids",
    "strip_comments",
]
