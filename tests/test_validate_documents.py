"""End-to-end tests for the document validation use case."""

from __future__ import annotations

from pathlib import Path

import pytest

from docaudit.config.loader import clear_cache, load_config
from docaudit.domain.models.report import Report
from docaudit.rules.registry import default_rules
from docaudit.application.use_cases.validate_documents import ValidateDocumentsUseCase


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def use_case():
    settings = load_config().validator
    return ValidateDocumentsUseCase(lambda: default_rules(settings))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestValidateDocuments:
    def test_procedure_scenario(self, tmp_path, use_case):
        path = _write(tmp_path / "proc_example.adoc", "[id='foo']\n= Example\n\nSome prose.\n")
        lines: list[str] = []
        report = use_case.execute([path], Report(sink=lines.append))

        assert report.issues == 3
        failures = [line for line in lines if "[ FAIL ]" in line]
        assert len(failures) == 3
        assert any("'context' attribute is not set" in line for line in failures)
        assert any("does not contain any steps" in line for line in failures)
        assert any("'foo' ID does not include" in line for line in failures)
        assert lines[-1] == f"Checked {report.checked} item(s), found 3 problem(s)."
        assert report.succeeded is False

    def test_header_lines(self, tmp_path, use_case):
        path = _write(tmp_path / "con_clean.adoc", ":context: clean\n= Overview\n")
        report = use_case.execute([path], Report())
        assert report.lines[0] == f"Testing file: {path.resolve()}"
        assert "  Document type: concept" in report.lines
        assert report.succeeded is True

    def test_clean_procedure_passes(self, tmp_path, use_case):
        text = (
            ":context: install\n"
            "[id='proc_installing_{context}']\n"
            "= Installing RHEL\n\n"
            ".Procedure\n"
            ". Download the image from https://access.redhat.com/downloads.\n"
        )
        path = _write(tmp_path / "proc_installing.adoc", text)
        report = use_case.execute([path], Report())
        assert report.issues == 0
        assert report.checked == 7

    def test_counters_span_every_document(self, tmp_path, use_case):
        bad = _write(tmp_path / "proc_bad.adoc", "[id='foo']\n")
        clean = _write(tmp_path / "con_ok.adoc", ":context: ok\n")
        report = use_case.execute([bad, clean], Report())
        assert report.issues == 3
        assert sum(1 for line in report.lines if line.startswith("Testing file:")) == 2
        assert sum(1 for line in report.lines if line.startswith("Checked ")) == 1

    def test_attribute_file(self, tmp_path, use_case):
        path = _write(tmp_path / "_attributes" / "attributes.adoc", ":context: docs\n")
        report = use_case.execute([path], Report())
        assert report.issues == 0
        assert report.checked == 3
