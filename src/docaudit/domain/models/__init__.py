"""Domain models public API.

``Document`` is imported from :mod:`docaudit.domain.models.document`
directly; it depends on :mod:`docaudit.markup`, which depends on the enums
exported here.
"""

from docaudit.domain.models.enums import DocumentType, Status, Verdict
from docaudit.domain.models.links import LinkResult
from docaudit.domain.models.report import Outcome, Report

__all__ = [
    # Enums
    "DocumentType",
    "Status",
    "Verdict",
    # Validation
    "Outcome",
    "Report",
    # Links
    "LinkResult",
]
