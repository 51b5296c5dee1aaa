"""Use Case: Check Links.

Extracts the external links of one file and probes them through the
coordinator. Output filtering and colouring belong to the caller's
``on_result`` callback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from docaudit.config.models import LinkCheckSettings
from docaudit.domain.models.links import LinkResult
from docaudit.domain.ports.link_prober import LinkProberPort
from docaudit.links.coordinator import LinkCheckCoordinator, ResultCallback
from docaudit.links.extractor import extract_links


class CheckLinksUseCase:
    """Orchestrate link extraction and probing for a single file."""

    def __init__(self, prober: LinkProberPort, settings: LinkCheckSettings) -> None:
        self._prober = prober
        self._settings = settings

    def list_links(self, path: Path, *, xinclude: bool = False) -> list[str]:
        """Return the links of *path* without checking them."""
        return extract_links(
            path,
            xinclude=xinclude,
            placeholder_hosts=self._settings.placeholder_hosts,
        )

    def execute(
        self,
        path: Path,
        *,
        xinclude: bool = False,
        workers: Optional[int] = 1,
        on_result: ResultCallback,
    ) -> list[LinkResult]:
        """Probe every link of *path*.

        Args:
            path: An AsciiDoc or DocBook file.
            xinclude: Expand ``xi:include`` statements (DocBook only).
            workers: Pool size; 1 is sequential, ``None`` one per link.
            on_result: Called once per link, serialised.

        Raises:
            LinkExtractionError: The file cannot be parsed.
        """
        urls = self.list_links(path, xinclude=xinclude)
        coordinator = LinkCheckCoordinator(self._prober, workers=workers, on_result=on_result)
        return coordinator.run(urls)
