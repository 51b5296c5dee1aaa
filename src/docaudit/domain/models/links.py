"""Link check result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from docaudit.domain.models.enums import Verdict


@dataclass(frozen=True)
class LinkResult:
    """Verdict for one URL, with the HTTP status or error when probed."""

    url: str
    verdict: Verdict
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def reachable(self) -> bool:
        return self.verdict is Verdict.REACHABLE
