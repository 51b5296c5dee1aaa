"""External link extraction.

AsciiDoc sources are scanned with a URL pattern after comment removal;
DocBook sources are delegated to :mod:`docaudit.links.docbook`. No network
I/O happens here.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator
from urllib.parse import urlsplit

from docaudit.markup.preprocessor import strip_comments

_URL = re.compile(r"https?://[^\s\[]+")
_TRAILING_PUNCTUATION = ".,;:!?"

DOCBOOK_SUFFIXES = frozenset({".xml"})


def iter_urls(content: str) -> Iterator[str]:
    """Yield every URL-shaped substring of *content* in order."""
    for match in _URL.finditer(content):
        url = match.group(0).rstrip(_TRAILING_PUNCTUATION)
        if url:
            yield url


def host_of(url: str) -> str:
    """Return the lower-cased host of *url*, or ``""`` if it has none."""
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""


def drop_placeholders(urls: Iterable[str], placeholder_hosts: Iterable[str]) -> list[str]:
    """Deduplicate *urls* keeping first-seen order, minus placeholder hosts."""
    hosts = {h.lower() for h in placeholder_hosts}
    unique = dict.fromkeys(urls)
    return [url for url in unique if host_of(url) not in hosts]


def extract_asciidoc_links(text: str, placeholder_hosts: Iterable[str] = ()) -> list[str]:
    """Return the unique external links of an AsciiDoc document.

    Links inside comments are never returned; links to placeholder hosts
    such as ``localhost`` or ``example.com`` are dropped.
    """
    return drop_placeholders(iter_urls(strip_comments(text)), placeholder_hosts)


def extract_links(
    path: Path,
    *,
    xinclude: bool = False,
    placeholder_hosts: Iterable[str] = (),
) -> list[str]:
    """Extract links from *path*, choosing the parser by file extension.

    Raises:
        LinkExtractionError: The DocBook file cannot be parsed.
    """
    path = Path(path)
    if path.suffix.lower() in DOCBOOK_SUFFIXES:
        from docaudit.links.docbook import extract_docbook_links

        return extract_docbook_links(path, xinclude=xinclude, placeholder_hosts=placeholder_hosts)
    text = path.read_text(encoding="utf-8", errors="replace")
    return extract_asciidoc_links(text, placeholder_hosts)
