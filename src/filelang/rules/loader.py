"""Load routing rules from YAML files and compile their patterns.

A rules file looks like:

    rules:
      - name: archiveName
        pattern: "date:file:yyyyMMdd"
        description: Archive folder per modification day
      - name: baseName
        pattern: "file:name.noext"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from filelang.expressions import Expression, FileLanguage, SimpleExpression
from filelang.expressions.parser import FILE_PREFIX
from filelang.rules.validator import RuleIssue, validate_rules_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A named, compiled pattern."""

    name: str
    pattern: str
    expression: Expression
    description: str = ""


@dataclass
class RuleSet:
    """Rules loaded from one file, plus any issues found while loading.

    Rules with issues are left out of ``rules``; the rest are usable.
    """

    file: Path
    rules: dict[str, Rule] = field(default_factory=dict)
    issues: list[RuleIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[RuleIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[RuleIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    def get(self, name: str) -> Rule | None:
        return self.rules.get(name)

    def list_rules(self) -> list[str]:
        return list(self.rules.keys())


def load_rules(path: Path, language: FileLanguage | None = None) -> RuleSet:
    """Load and compile every rule in a YAML rules file.

    Args:
        path: The rules file
        language: Language used to compile patterns; a default one when omitted

    Returns:
        The RuleSet. Schema violations, syntax errors and duplicate names
        are reported as errors, unknown file attributes as warnings.
    """
    language = language or FileLanguage()
    rule_set = RuleSet(file=path)

    try:
        with path.open() as f:
            doc = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        rule_set.issues.append(RuleIssue(file=path, message=f"YAML parse error: {exc}"))
        return rule_set

    if doc is None:
        rule_set.issues.append(
            RuleIssue(file=path, message="File is empty or contains only whitespace")
        )
        return rule_set

    schema_issues = validate_rules_document(doc, path)
    if schema_issues:
        rule_set.issues.extend(schema_issues)
        logger.warning("Rules file %s failed schema validation", path)
        return rule_set

    for index, data in enumerate(doc["rules"]):
        location = f"rules[{index}]"
        name = data["name"]

        if name in rule_set.rules:
            rule_set.issues.append(
                RuleIssue(file=path, message=f"Duplicate rule name '{name}'", path=location)
            )
            continue

        result = language.compile(data["pattern"])
        if not result.ok:
            rule_set.issues.append(
                RuleIssue(file=path, message=str(result.error), path=f"{location}/pattern")
            )
            continue

        expression = result.unwrap()
        if data["pattern"].startswith(FILE_PREFIX) and isinstance(expression, SimpleExpression):
            rule_set.issues.append(
                RuleIssue(
                    file=path,
                    message=(
                        f"Unknown file attribute in '{data['pattern']}', "
                        "the whole pattern is treated as templating text"
                    ),
                    path=f"{location}/pattern",
                    severity="warning",
                )
            )

        rule_set.rules[name] = Rule(
            name=name,
            pattern=data["pattern"],
            expression=expression,
            description=data.get("description", ""),
        )

    if rule_set.issues:
        logger.warning("Rules file %s has %d issue(s)", path, len(rule_set.issues))

    return rule_set
