"""External link checking: extraction, probing, and coordination."""

from docaudit.links.coordinator import LinkCheckCoordinator
from docaudit.links.extractor import extract_asciidoc_links, extract_links
from docaudit.links.prober import HttpLinkProber, is_ignored

__all__ = [
    "HttpLinkProber",
    "LinkCheckCoordinator",
    "extract_asciidoc_links",
    "extract_links",
    "is_ignored",
]
