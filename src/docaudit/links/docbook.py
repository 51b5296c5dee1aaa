"""DocBook XML link extraction with optional XInclude processing.

Collects ``ulink/@url`` (DocBook 4) and any ``xlink:href`` attribute
(DocBook 5). The result is sorted and unique, like ``sort -u`` output.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Iterator
from xml.etree import ElementInclude

from docaudit.domain.errors import LinkExtractionError
from docaudit.links.extractor import drop_placeholders

logger = logging.getLogger(__name__)

_XLINK_HREF = "{http://www.w3.org/1999/xlink}href"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def iter_docbook_urls(root: ET.Element) -> Iterator[str]:
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        if _local_name(element.tag) == "ulink":
            url = element.get("url")
            if url:
                yield url.strip()
        href = element.get(_XLINK_HREF)
        if href:
            yield href.strip()


def load_docbook(path: Path, *, xinclude: bool = False) -> ET.Element:
    """Parse *path*, expanding ``xi:include`` elements when *xinclude* is set."""
    try:
        root = ET.parse(path).getroot()
        if xinclude:
            logger.debug("Expanding XInclude statements in %s", path)
            ElementInclude.include(root, base_url=str(path.resolve()))
    except ET.ParseError as exc:
        raise LinkExtractionError(f"{path}: Not a well-formed XML file ({exc})") from exc
    except ElementInclude.FatalIncludeError as exc:
        raise LinkExtractionError(f"{path}: XInclude processing failed ({exc})") from exc
    except OSError as exc:
        raise LinkExtractionError(f"{path}: {exc}") from exc
    return root


def extract_docbook_links(
    path: Path,
    *,
    xinclude: bool = False,
    placeholder_hosts: Iterable[str] = (),
) -> list[str]:
    """Return the sorted unique external links of a DocBook file."""
    root = load_docbook(Path(path), xinclude=xinclude)
    urls = sorted({url for url in iter_docbook_urls(root) if url})
    return drop_placeholders(urls, placeholder_hosts)
