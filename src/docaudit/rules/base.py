"""Base interface for document rules.

Every rule follows the same contract:
  1. Declares which document types it applies to
  2. Reads a ``Document`` (never mutates it)
  3. Yields one ``Outcome`` per evaluation, or one per extracted element
     for element-level rules such as the ID checks
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

from docaudit.domain.models.enums import DocumentType, Status
from docaudit.domain.models.report import Outcome

if TYPE_CHECKING:
    from docaudit.domain.models.document import Document


class Rule(ABC):
    """Abstract base for every rule in the registry.

    Subclasses set ``name`` and ``applies_to`` and implement
    ``evaluate(document)``.
    """

    name: str = ""
    applies_to: frozenset[DocumentType] = frozenset()

    def applicable(self, doc_type: DocumentType) -> bool:
        return doc_type in self.applies_to

    @abstractmethod
    def evaluate(self, document: Document) -> Iterator[Outcome]:
        """Yield the outcomes of checking *document*."""

    # Convenience helpers used by concrete rules
    def _pass(self, explanation: str) -> Outcome:
        return Outcome(rule=self.name, status=Status.PASS, explanation=explanation)

    def _fail(self, explanation: str) -> Outcome:
        return Outcome(rule=self.name, status=Status.FAIL, explanation=explanation)

    def _check(self, passed: bool, if_pass: str, if_fail: str) -> Outcome:
        return self._pass(if_pass) if passed else self._fail(if_fail)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
