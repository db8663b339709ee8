"""Public package surface for dirbrowse.

Exports ``DirectoryBrowser`` and the action/directive types hosts use to
drive it, plus ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .actions import Action, ActionKind, Directive, DirectiveKind
from .browser import DirectoryBrowser
from .entries import Entry, EntryKind, scan_directory


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Action",
    "ActionKind",
    "Directive",
    "DirectiveKind",
    "DirectoryBrowser",
    "Entry",
    "EntryKind",
    "scan_directory",
    "main",
]
