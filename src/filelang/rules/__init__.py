"""Routing rules files: named patterns compiled at load time."""

from filelang.rules.loader import Rule, RuleSet, load_rules
from filelang.rules.validator import RuleIssue, validate_rules_document

__all__ = [
    "Rule",
    "RuleIssue",
    "RuleSet",
    "load_rules",
    "validate_rules_document",
]
