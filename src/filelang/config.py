"""Runtime configuration for filelang tooling."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_RULES_FILE = "rules.yaml"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class LanguageConfig:
    """Configuration for the CLI and rules loading.

    Attributes:
        rules_path: Rules file used when no path is given explicitly
        log_level: Logging level name (DEBUG, INFO, WARNING, ...)
    """

    rules_path: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> LanguageConfig:
        """Create config from environment variables.

        Resolution order for the rules file:
        1. FILELANG_RULES_PATH env var
        2. {base_path}/rules.yaml
        3. rules.yaml in the current directory
        """
        rules_path = os.environ.get("FILELANG_RULES_PATH")
        if rules_path:
            path = Path(rules_path)
        elif base_path:
            path = base_path / DEFAULT_RULES_FILE
        else:
            path = Path.cwd() / DEFAULT_RULES_FILE

        log_level = os.environ.get("FILELANG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        return cls(rules_path=path, log_level=log_level)

    @property
    def logging_level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
