"""Rule registry and runner.

Holds an ordered list of ``Rule`` instances and runs the applicable subset
against one document at a time. Every outcome is fed to the ``Report`` as
soon as it is produced, so the printed order matches evaluation order.
Rules can be added, removed, or reordered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docaudit.config.models import ValidatorSettings
from docaudit.rules.base import Rule
from docaudit.rules.checks import (
    AbbreviationsInHeadingsRule,
    AttributesLocationRule,
    ContextDefinedRule,
    ContextInIdsRule,
    DeprecatedTermsRule,
    NamingConventionRule,
    NoInternalMarkerRule,
    StepsForbiddenRule,
    StepsRequiredRule,
)

if TYPE_CHECKING:
    from docaudit.domain.models.document import Document
    from docaudit.domain.models.report import Report

logger = logging.getLogger(__name__)


def default_rules(settings: ValidatorSettings | None = None) -> list[Rule]:
    """Factory for the standard house-style rule set."""
    settings = settings or ValidatorSettings()
    return [
        NamingConventionRule(),
        ContextDefinedRule(),
        NoInternalMarkerRule(),
        StepsRequiredRule(),
        StepsForbiddenRule(),
        ContextInIdsRule(settings.context_placeholder),
        AbbreviationsInHeadingsRule(settings.abbreviations),
        DeprecatedTermsRule(settings.deprecated_terms),
        AttributesLocationRule(settings.attributes_path),
    ]


class RuleRunner:
    """Run registered rules against documents and record the outcomes.

    Usage::

        report = Report(verbose=True, sink=print)
        runner = RuleRunner(report)
        runner.run(Document.from_file(Path("proc_install.adoc")))
        print(report.summary())
    """

    def __init__(self, report: Report, rules: list[Rule] | None = None) -> None:
        self.report = report
        self._rules: list[Rule] = rules if rules is not None else default_rules()

    # -- Public API ------------------------------------------------------

    def run(self, document: Document) -> None:
        """Evaluate every rule applicable to *document*'s type."""
        selected = self.applicable_rules(document)
        logger.debug(
            "Running %d rule(s) on %s (%s): %s",
            len(selected),
            document.path,
            document.type.value,
            ", ".join(rule.name for rule in selected),
        )
        for rule in selected:
            for outcome in rule.evaluate(document):
                self.report.record(outcome)

    def applicable_rules(self, document: Document) -> list[Rule]:
        return [rule for rule in self._rules if rule.applicable(document.type)]

    def add_rule(self, rule: Rule, *, position: int | None = None) -> None:
        """Insert a custom rule into the registry.

        If *position* is ``None`` the rule is appended at the end.
        """
        if position is None:
            self._rules.append(rule)
        else:
            self._rules.insert(position, rule)

    def remove_rule(self, name: str) -> bool:
        """Remove the first rule whose ``name`` matches.

        Returns ``True`` if a rule was removed.
        """
        for i, rule in enumerate(self._rules):
            if rule.name == name:
                self._rules.pop(i)
                return True
        return False

    @property
    def rule_names(self) -> list[str]:
        """Names of the currently registered rules, in order."""
        return [rule.name for rule in self._rules]
