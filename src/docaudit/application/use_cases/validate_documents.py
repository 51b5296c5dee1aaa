"""Use Case: Validate Documents.

Runs the rule registry over one or more files, streaming everything into a
single ``Report`` whose counters span the whole run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

from docaudit.domain.models.document import Document
from docaudit.domain.models.report import Report
from docaudit.rules.base import Rule
from docaudit.rules.registry import RuleRunner


class ValidateDocumentsUseCase:
    """Orchestrate house-style validation of AsciiDoc files."""

    def __init__(self, rules_factory: Callable[[], list[Rule]]) -> None:
        self._rules_factory = rules_factory

    def execute(self, paths: Iterable[Path], report: Report) -> Report:
        """Validate every file in *paths* and print the summary.

        Args:
            paths: Files that already passed the precondition checks.
            report: Accumulator shared by every document of the run.

        Returns:
            The same *report*; ``report.succeeded`` is the run's result.
        """
        runner = RuleRunner(report, self._rules_factory())
        for index, path in enumerate(paths):
            if index:
                report.emit("")
            document = Document.from_file(path)
            report.emit(f"Testing file: {document.resolved_path}")
            report.emit("")
            report.emit(f"  Document type: {document.type.value}")
            report.emit("")
            runner.run(document)
        report.emit("")
        report.emit(report.summary())
        return report
