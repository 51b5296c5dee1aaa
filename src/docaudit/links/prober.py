"""HTTP link prober implementing LinkProberPort with requests.

Policy per URL:
  • ``mailto:``, ``file:///`` and loopback hosts are ignored without a
    network call
  • anything without a ``scheme://`` prefix is unreachable
  • everything else gets a ``HEAD`` request: 5 s connect timeout, up to 3
    fixed retries on transient failures, redirects followed, IPv4 only
"""

from __future__ import annotations

import logging
import re
import socket
from typing import Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util import connection as urllib3_connection
from urllib3.util.retry import Retry

from docaudit.config.models import LinkCheckSettings
from docaudit.domain.models.enums import Verdict
from docaudit.domain.models.links import LinkResult
from docaudit.domain.ports.link_prober import LinkProberPort

logger = logging.getLogger(__name__)

_IGNORED = re.compile(
    r"^(?:mailto:|file:///|[a-z][a-z0-9+.-]*://(?:localhost|127\.0\.0\.1|\[::1\])(?:[:/?#]|$))",
    re.IGNORECASE,
)
_NETWORK = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def is_ignored(url: str) -> bool:
    """Return ``True`` for URLs that are never probed."""
    return _IGNORED.match(url) is not None


def _ipv4_only_family() -> socket.AddressFamily:
    return socket.AF_INET


def prefer_ipv4() -> None:
    """Make urllib3 resolve host names to IPv4 addresses only.

    urllib3 exposes address-family selection only as a module-level hook,
    so this affects every connection in the process.
    """
    urllib3_connection.allowed_gai_family = _ipv4_only_family


def build_session(settings: LinkCheckSettings, *, pool_size: int = 10) -> requests.Session:
    """Create a session with the retry policy mounted for http and https."""
    retry = Retry(
        total=settings.retries,
        connect=settings.retries,
        read=settings.retries,
        status=settings.retries,
        backoff_factor=0,
        status_forcelist=settings.retry_status_codes,
        allowed_methods=frozenset({"HEAD", "GET"}),
        raise_on_status=False,
        respect_retry_after_header=False,
    )
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = settings.user_agent
    session.verify = settings.verify_tls
    if not settings.verify_tls:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    if settings.ipv4_only:
        prefer_ipv4()
    return session


class HttpLinkProber(LinkProberPort):
    """Probe links with ``HEAD`` requests over a shared session."""

    def __init__(
        self,
        settings: Optional[LinkCheckSettings] = None,
        *,
        session: Optional[requests.Session] = None,
        pool_size: int = 10,
    ) -> None:
        self.settings = settings or LinkCheckSettings()
        self._session = session or build_session(self.settings, pool_size=pool_size)

    def probe(self, url: str) -> LinkResult:
        """Classify *url*; see the module docstring for the policy."""
        if is_ignored(url):
            return LinkResult(url=url, verdict=Verdict.IGNORED)
        if not _NETWORK.match(url):
            return LinkResult(url=url, verdict=Verdict.UNREACHABLE, error="Not a network URL")

        # Malformed hosts such as "a..b" surface as bare urllib3 errors
        try:
            resp = self._session.head(
                url,
                allow_redirects=True,
                timeout=(self.settings.connect_timeout, self.settings.read_timeout),
            )
        except (requests.RequestException, urllib3.exceptions.HTTPError, ValueError) as exc:
            logger.debug("Probe failed for %s: %s", url, exc)
            return LinkResult(url=url, verdict=Verdict.UNREACHABLE, error=str(exc))

        logger.debug("Probe of %s returned HTTP %s", url, resp.status_code)
        if self.settings.fail_on_http_error and resp.status_code >= 400:
            return LinkResult(
                url=url,
                verdict=Verdict.UNREACHABLE,
                status_code=resp.status_code,
                error=f"HTTP {resp.status_code}",
            )
        return LinkResult(url=url, verdict=Verdict.REACHABLE, status_code=resp.status_code)

    def close(self) -> None:
        self._session.close()
