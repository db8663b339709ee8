"""Live browsing state: the current root and its scanned entries."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .entries import Entry, EntryKind, scan_directory

logger = logging.getLogger(__name__)

PARENT_ENTRY_NAME = ".."


def parent_entry_for(root: Path) -> Entry | None:
    """Return a synthetic ``..`` entry for ``root``, or ``None`` at the filesystem root."""
    parent = root.parent
    if parent == root:
        return None
    return Entry(name=PARENT_ENTRY_NAME, path=parent, kind=EntryKind.DIRECTORY)


@dataclass
class BrowserSession:
    """Current root plus the entries scanned from it.

    ``entries`` is only ever replaced wholesale by ``rescan``.
    """

    current_root: Path
    show_parent_entry: bool = False
    scan: Callable[[Path], list[Entry]] = scan_directory
    entries: list[Entry] = field(default_factory=list)

    def rescan(self) -> None:
        """Replace ``entries`` with a fresh scan of ``current_root``."""
        entries = self.scan(self.current_root)
        if self.show_parent_entry:
            parent = parent_entry_for(self.current_root)
            if parent is not None:
                entries = [parent, *entries]
        self.entries = entries
        logger.debug("scanned %s: %d entries", self.current_root, len(self.entries))

    def enter(self, entry: Entry) -> None:
        """Re-root the session at ``entry`` and rescan."""
        self.current_root = entry.path
        self.entries = []
        logger.info("entering %s", self.current_root)
        self.rescan()

    def entry_at(self, index: int | None) -> Entry | None:
        """Return the entry at ``index`` when it is in range."""
        if index is None or index < 0 or index >= len(self.entries):
            return None
        return self.entries[index]


__all__ = [
    "PARENT_ENTRY_NAME",
    "parent_entry_for",
    "BrowserSession",
]
