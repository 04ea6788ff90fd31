"""
rules/validator.py: JSON Schema validation for filelang rules files.

Usage:
    from filelang.rules.validator import validate_rules_document

    issues = validate_rules_document(doc, Path("rules.yaml"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "rules.schema.json"


@dataclass
class RuleIssue:
    """A single finding for a rules file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "rules[2]/pattern"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


@lru_cache(maxsize=1)
def _load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def validate_rules_document(doc: Any, file: Path) -> list[RuleIssue]:
    """
    Validate a parsed rules document against the rules JSON Schema.

    Args:
        doc:  The parsed YAML document.
        file: The file it came from, for reporting.

    Returns:
        A list of :class:`RuleIssue` objects (empty on success).
    """
    validator = Draft202012Validator(_load_schema())
    return [
        RuleIssue(file=file, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=lambda e: list(e.path))
    ]
