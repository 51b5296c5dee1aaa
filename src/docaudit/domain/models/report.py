"""Outcome and Report: the result side of document validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from docaudit.domain.models.enums import Status

# Receives one formatted report line at a time.
LineSink = Callable[[str], None]


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating one rule against one document or element."""

    rule: str
    status: Status
    explanation: str

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS

    def format(self) -> str:
        """Render as a fixed-width report line: ``  [ FAIL ]   ...``."""
        tag = f"[ {self.status.value.upper()} ]"
        return f"  {tag:<10} {self.explanation}"


def _discard(line: str) -> None:
    pass


@dataclass
class Report:
    """Process-wide accumulator for every outcome of a validation run.

    Failures are printed as soon as they are recorded; passes only when
    ``verbose`` is set. Counting never depends on verbosity, so
    ``issues <= checked`` holds after every call to :meth:`record`.
    """

    verbose: bool = False
    sink: LineSink = _discard
    checked: int = 0
    issues: int = 0
    lines: list[str] = field(default_factory=list)

    def record(self, outcome: Outcome) -> None:
        self.checked += 1
        if outcome.passed:
            if not self.verbose:
                return
        else:
            self.issues += 1
        self.emit(outcome.format())

    def emit(self, line: str) -> None:
        """Print a line and keep it in the ordered transcript."""
        self.lines.append(line)
        self.sink(line)

    @property
    def succeeded(self) -> bool:
        return self.issues == 0

    def summary(self) -> str:
        return f"Checked {self.checked} item(s), found {self.issues} problem(s)."
