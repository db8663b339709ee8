"""Domain datatypes for directory listing entries."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    """One visible child of the browsed root."""

    name: str
    path: Path
    kind: EntryKind


__all__ = [
    "EntryKind",
    "Entry",
]
