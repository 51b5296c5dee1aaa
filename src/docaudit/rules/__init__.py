"""House-style rules for modular documentation.

Provides a registry of type-conditional rules and a runner that records
their outcomes in a ``Report``.
"""

from docaudit.rules.base import Rule
from docaudit.rules.registry import RuleRunner, default_rules

__all__ = ["Rule", "RuleRunner", "default_rules"]
