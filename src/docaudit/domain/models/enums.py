"""Enumerations for document auditing."""

from enum import Enum


class DocumentType(str, Enum):
    """Modular documentation types, inferred from the file name."""

    CONCEPT = "concept"
    REFERENCE = "reference"
    PROCEDURE = "procedure"
    ASSEMBLY = "assembly"
    MASTER = "master"
    ATTRIBUTES = "attributes"
    UNKNOWN = "unknown"


# Types that share the module/assembly rule set.
MODULE_TYPES = frozenset(
    {
        DocumentType.CONCEPT,
        DocumentType.REFERENCE,
        DocumentType.PROCEDURE,
        DocumentType.ASSEMBLY,
        DocumentType.UNKNOWN,
    }
)

KNOWN_TYPES = frozenset(t for t in DocumentType if t is not DocumentType.UNKNOWN)


class Status(str, Enum):
    """Outcome of a single rule evaluation."""

    PASS = "pass"
    FAIL = "fail"


class Verdict(str, Enum):
    """Reachability classification of an external link."""

    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    IGNORED = "ignored"

    @property
    def label(self) -> str:
        """Tag printed in front of the URL."""
        return _VERDICT_LABELS[self]


_VERDICT_LABELS = {
    Verdict.REACHABLE: "PASSED",
    Verdict.UNREACHABLE: "FAILED",
    Verdict.IGNORED: "IGNORED",
}
