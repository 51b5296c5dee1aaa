"""Concurrency coordinator for link probes.

Fans a URL list out to a ``LinkProberPort`` on a worker pool and hands each
result to a callback. The callback runs under a lock, so output lines
written from it never interleave.

Pool size 1 processes URLs strictly in order; a larger pool reports results
in completion order.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Optional, Sequence

from docaudit.domain.models.links import LinkResult
from docaudit.domain.ports.link_prober import LinkProberPort

logger = logging.getLogger(__name__)

ResultCallback = Callable[[LinkResult], None]


def _ignore(result: LinkResult) -> None:
    pass


class LinkCheckCoordinator:
    """Dispatch probes across a bounded worker pool.

    Usage::

        coordinator = LinkCheckCoordinator(prober, workers=None, on_result=print)
        results = coordinator.run(urls)

    ``workers=None`` means one worker per URL.
    """

    def __init__(
        self,
        prober: LinkProberPort,
        *,
        workers: Optional[int] = 1,
        on_result: ResultCallback = _ignore,
    ) -> None:
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self._prober = prober
        self._workers = workers
        self._on_result = on_result
        self._lock = threading.Lock()

    def pool_size(self, url_count: int) -> int:
        if self._workers is None:
            return max(1, url_count)
        return max(1, min(self._workers, url_count))

    def run(self, urls: Sequence[str]) -> list[LinkResult]:
        """Probe every URL and return the results in emission order."""
        size = self.pool_size(len(urls))
        logger.debug("Checking %d link(s) with %d worker(s)", len(urls), size)
        if size == 1:
            return [self._emit(self._prober.probe(url)) for url in urls]

        results: list[LinkResult] = []
        with ThreadPoolExecutor(max_workers=size, thread_name_prefix="probe") as pool:
            futures = [pool.submit(self._prober.probe, url) for url in urls]
            for future in as_completed(futures):
                results.append(self._emit(future.result()))
        return results

    def _emit(self, result: LinkResult) -> LinkResult:
        with self._lock:
            self._on_result(result)
        return result
