"""Element extraction from comment-stripped AsciiDoc content.

Each pass is a lazy generator over the lines of the content. Nothing here
parses the full grammar; lines that do not match a pattern are skipped, so
malformed or partial markup never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

# -- Patterns --------------------------------------------------------

_ID = re.compile(r"""^\[id=(["'])(?P<value>.*?)\1""", re.MULTILINE)
_HEADING = re.compile(r"^(?P<marks>=+)[ \t]+(?P<title>\S.*?)[ \t]*$", re.MULTILINE)
_STEP = re.compile(r"^\.+[ \t]+\S+", re.MULTILINE)
_ATTRIBUTE = re.compile(
    r"^:(?P<name>!?[\w][\w-]*!?):(?:[ \t]*(?P<value>.*?))?[ \t]*$",
    re.MULTILINE,
)


@dataclass(frozen=True)
class Heading:
    """A section title; ``level`` 0 is the document title (``=``)."""

    level: int
    title: str

    def __str__(self) -> str:
        return self.title


def iter_ids(content: str) -> Iterator[str]:
    """Yield explicit ``[id="..."]`` identifiers in document order."""
    for match in _ID.finditer(content):
        yield match.group("value")


def iter_headings(content: str) -> Iterator[Heading]:
    """Yield section headings (``= Title``, ``== Title``, ...) in order."""
    for match in _HEADING.finditer(content):
        yield Heading(level=len(match.group("marks")) - 1, title=match.group("title"))


def has_steps(content: str) -> bool:
    """Return ``True`` if *content* contains at least one step marker."""
    return _STEP.search(content) is not None


def iter_attributes(content: str) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` for every ``:name: value`` definition.

    Unset forms (``:name!:`` and ``:!name:``) are skipped; the value is an
    empty string when the attribute is defined without one.
    """
    for match in _ATTRIBUTE.finditer(content):
        name = match.group("name")
        if name.startswith("!") or name.endswith("!"):
            continue
        yield name, match.group("value") or ""
