"""Filesystem scanning and sort policy for directory listings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import Entry, EntryKind

logger = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dotfile (``.`` and ``..`` included)."""
    return name.startswith(".")


def classify_dir_entry(child: os.DirEntry) -> EntryKind | None:
    """Map a scandir entry to an ``EntryKind``, or ``None`` when it is not listable.

    Symlinks are not followed, so links, devices, FIFOs and sockets all
    classify as ``None``.
    """
    try:
        if child.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if child.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        return None
    return None


def entry_sort_key(entry: Entry) -> tuple[bool, bytes]:
    """Directories first, then byte-wise name order."""
    return (entry.kind is not EntryKind.DIRECTORY, os.fsencode(entry.name))


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Sort ``entries`` in place with the listing order and return them."""
    entries.sort(key=entry_sort_key)
    return entries


def scan_directory(root: Path) -> list[Entry]:
    """List the visible children of ``root`` in listing order.

    Returns an empty list when ``root`` cannot be scanned; the failure is
    only logged.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(root) as children:
            for child in children:
                name = child.name
                if is_hidden_name(name):
                    continue
                kind = classify_dir_entry(child)
                if kind is None:
                    continue
                entries.append(Entry(name=name, path=Path(root) / name, kind=kind))
    except OSError as exc:
        logger.debug("cannot scan %s: %s", root, exc)
        return []

    return sort_entries(entries)


__all__ = [
    "is_hidden_name",
    "classify_dir_entry",
    "entry_sort_key",
    "sort_entries",
    "scan_directory",
]
