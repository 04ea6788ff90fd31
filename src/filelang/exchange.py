"""Evaluation context for compiled expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any


@dataclass
class FileExchange:
    """A file message moving through a route.

    Attributes:
        file: The file being routed, or None for exchanges without a file
        headers: Message headers
        properties: Exchange properties set by earlier route steps
        modified: Explicit last-modified time; read from the file when unset
    """

    file: Path | None = None
    headers: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, Any] = field(default_factory=dict)
    modified: datetime | None = None

    def __post_init__(self) -> None:
        if self.file is not None and not isinstance(self.file, Path):
            self.file = Path(self.file)

    @property
    def last_modified(self) -> datetime | None:
        """Last-modified time of the file, timezone-aware local time."""
        if self.modified is not None:
            return self.modified
        if self.file is None or not self.file.exists():
            return None
        return datetime.fromtimestamp(self.file.stat().st_mtime).astimezone()
