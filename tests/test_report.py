"""Tests for Outcome formatting and the Report accumulator."""

from docaudit.domain.models.enums import Status
from docaudit.domain.models.report import Outcome, Report


def _outcome(status: Status, text: str = "explanation") -> Outcome:
    return Outcome(rule="r", status=status, explanation=text)


class TestOutcome:
    def test_fixed_width_tag(self):
        assert _outcome(Status.FAIL, "Broken.").format() == "  [ FAIL ]   Broken."
        assert _outcome(Status.PASS, "Fine.").format() == "  [ PASS ]   Fine."

    def test_passed(self):
        assert _outcome(Status.PASS).passed is True
        assert _outcome(Status.FAIL).passed is False


class TestReport:
    def test_failures_are_counted_and_printed(self):
        lines: list[str] = []
        report = Report(sink=lines.append)
        report.record(_outcome(Status.FAIL, "bad"))
        assert (report.checked, report.issues) == (1, 1)
        assert lines == ["  [ FAIL ]   bad"]

    def test_passes_are_silent_unless_verbose(self):
        lines: list[str] = []
        report = Report(sink=lines.append)
        report.record(_outcome(Status.PASS))
        assert (report.checked, report.issues) == (1, 0)
        assert lines == []

        verbose = Report(verbose=True, sink=lines.append)
        verbose.record(_outcome(Status.PASS, "ok"))
        assert lines == ["  [ PASS ]   ok"]

    def test_summary_and_success(self):
        report = Report()
        assert report.succeeded is True
        report.record(_outcome(Status.PASS))
        report.record(_outcome(Status.FAIL))
        report.record(_outcome(Status.FAIL))
        assert report.summary() == "Checked 3 item(s), found 2 problem(s)."
        assert report.succeeded is False

    def test_transcript_keeps_order(self):
        report = Report(verbose=True)
        report.emit("header")
        report.record(_outcome(Status.PASS, "first"))
        report.record(_outcome(Status.FAIL, "second"))
        assert report.lines == ["header", "  [ PASS ]   first", "  [ FAIL ]   second"]
