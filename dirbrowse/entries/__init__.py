"""Domain model for one directory listing.

This package contains non-UI listing primitives:
- entry datatypes tagged as directory or file
- the hidden-name filter and directories-first sort policy
- the non-recursive directory scan
"""

from __future__ import annotations

from .types import Entry, EntryKind
from .scan import classify_dir_entry, entry_sort_key, is_hidden_name, scan_directory, sort_entries

__all__ = [
    "Entry",
    "EntryKind",
    "classify_dir_entry",
    "entry_sort_key",
    "is_hidden_name",
    "scan_directory",
    "sort_entries",
]
