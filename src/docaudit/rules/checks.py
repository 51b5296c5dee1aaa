"""Concrete house-style rules.

Rules enforced:
  • File names use a type prefix (con_, ref_, proc_, assembly_)
  • The ``context`` attribute is set to a non-empty value
  • The ``internal`` editorial attribute is not defined
  • Procedures contain steps; concepts and references do not
  • Every ID embeds the context placeholder
  • Headings use defined abbreviations instead of their expansions
  • Deprecated product names are not used
  • Attribute files live at the canonical location
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterator, Mapping

from docaudit.domain.models.enums import KNOWN_TYPES, MODULE_TYPES, DocumentType
from docaudit.domain.models.report import Outcome
from docaudit.rules.base import Rule

if TYPE_CHECKING:
    from docaudit.domain.models.document import Document


def _phrase_pattern(phrase: str, *, ignore_case: bool) -> re.Pattern[str]:
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", flags)


# ---------------------------------------------------------------------------
# Naming and metadata
# ---------------------------------------------------------------------------


class NamingConventionRule(Rule):
    name = "naming-convention"
    applies_to = MODULE_TYPES

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        yield self._check(
            document.type is not DocumentType.UNKNOWN,
            f"The file name uses a prefix to identify itself as '{document.type.value}'.",
            "The file name does not use the con_, ref_, proc_, or assembly_ prefix.",
        )


class ContextDefinedRule(Rule):
    """The ``context`` attribute must be set to a non-empty string."""

    name = "context-defined"
    applies_to = KNOWN_TYPES

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        value = document.attributes.get("context", "").strip()
        yield self._check(
            bool(value),
            "The 'context' attribute is set to a non-empty string.",
            "The 'context' attribute is not set to a non-empty string.",
        )


class NoInternalMarkerRule(Rule):
    """Editorial drafts are flagged with ``:internal:``; published files must not be."""

    name = "no-internal-marker"
    applies_to = frozenset(DocumentType)

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        yield self._check(
            "internal" not in document.attributes,
            "The 'internal' attribute is not defined.",
            "The 'internal' attribute is defined; remove it before publishing.",
        )


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class StepsRequiredRule(Rule):
    name = "steps-required"
    applies_to = frozenset({DocumentType.PROCEDURE})

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        yield self._check(
            document.has_steps,
            "The procedure module contains at least one step.",
            "The procedure module does not contain any steps.",
        )


class StepsForbiddenRule(Rule):
    name = "steps-forbidden"
    applies_to = frozenset({DocumentType.CONCEPT, DocumentType.REFERENCE})

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        kind = document.type.value
        yield self._check(
            not document.has_steps,
            f"The {kind} module does not contain any steps.",
            f"The {kind} module contains steps; move them to a procedure module.",
        )


class ContextInIdsRule(Rule):
    """IDs must embed the context placeholder to remain reusable in assemblies."""

    name = "context-in-ids"
    applies_to = MODULE_TYPES

    def __init__(self, placeholder: str = "{context}") -> None:
        self.placeholder = placeholder

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        for unique_id in document.ids:
            yield self._check(
                self.placeholder in unique_id,
                f"The '{unique_id}' ID includes the 'context' attribute.",
                f"The '{unique_id}' ID does not include the 'context' attribute.",
            )


# ---------------------------------------------------------------------------
# Terminology
# ---------------------------------------------------------------------------


class AbbreviationsInHeadingsRule(Rule):
    """Headings must use the abbreviation, never its expansion.

    A heading that uses neither form produces no outcome at all.
    """

    name = "abbreviations-in-headings"
    applies_to = MODULE_TYPES

    def __init__(self, abbreviations: Mapping[str, str]) -> None:
        self._forms = [
            (
                abbreviation,
                expansion,
                _phrase_pattern(abbreviation, ignore_case=False),
                _phrase_pattern(expansion, ignore_case=True),
            )
            for abbreviation, expansion in abbreviations.items()
        ]

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        for heading in document.headings:
            used = None
            for abbreviation, expansion, short, long in self._forms:
                if long.search(heading.title):
                    yield self._fail(
                        f"The '{heading.title}' heading uses '{expansion}' "
                        f"instead of '{abbreviation}'."
                    )
                    break
                if used is None and short.search(heading.title):
                    used = abbreviation
            else:
                if used is not None:
                    yield self._pass(
                        f"The '{heading.title}' heading uses the '{used}' abbreviation."
                    )


class DeprecatedTermsRule(Rule):
    name = "deprecated-terms"
    applies_to = MODULE_TYPES

    def __init__(self, glossary: Mapping[str, str]) -> None:
        self._terms = [
            (old, new, _phrase_pattern(old, ignore_case=True)) for old, new in glossary.items()
        ]

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        found = False
        for old, new, pattern in self._terms:
            if pattern.search(document.content):
                found = True
                yield self._fail(f"The document uses '{old}'; use '{new}' instead.")
        if not found:
            yield self._pass("The document does not use deprecated terminology.")


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------


class AttributesLocationRule(Rule):
    name = "attributes-location"
    applies_to = frozenset({DocumentType.ATTRIBUTES})

    def __init__(self, subpath: str = "_attributes/attributes.adoc") -> None:
        self.subpath = subpath.strip("/")

    def evaluate(self, document: Document) -> Iterator[Outcome]:
        resolved = document.resolved_path.as_posix()
        yield self._check(
            resolved.endswith("/" + self.subpath),
            f"The attribute file is stored in '{self.subpath}'.",
            f"The attribute file is not stored in '{self.subpath}'.",
        )
