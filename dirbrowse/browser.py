"""Directory-browsing mode driven by a host selection UI.

The host owns rendering and input. It asks the browser for entry count,
display text and matches, then reports the user's final action through
``handle_action`` and follows the returned ``Directive``:

- directories descend in place and reset the host view
- files are opened with the configured opener and end the mode
- everything else maps to a fixed directive with no state change
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from .actions import (
    MODE_EXIT,
    NEXT_DIALOG,
    PREVIOUS_DIALOG,
    RELOAD_DIALOG,
    RESET_DIALOG,
    Action,
    ActionKind,
    Directive,
    switch_mode,
)
from .config import BrowserSettings
from .entries import Entry, EntryKind
from .exceptions import BrowserNotInitializedError
from .launcher import build_open_command, launch_detached
from .matching import token_match
from .session import BrowserSession

MODE_NAME = "file_browser"


class DirectoryBrowser:
    """One instantiable browser mode with injected host capabilities."""

    name = MODE_NAME

    def __init__(
        self,
        settings: BrowserSettings | None = None,
        home_directory: Callable[[], Path] = Path.home,
        token_match: Callable[[Sequence[str], str], bool] = token_match,
        launch_detached: Callable[[Path, str], None] = launch_detached,
    ) -> None:
        self.settings = settings if settings is not None else BrowserSettings()
        self._home_directory = home_directory
        self._token_match = token_match
        self._launch_detached = launch_detached
        self.session: BrowserSession | None = None

    # Lifecycle

    def init(self) -> None:
        """Start a session at the home directory; no-op when already live."""
        if self.session is not None:
            return
        root = Path(self._home_directory())
        self.session = BrowserSession(
            current_root=root,
            show_parent_entry=self.settings.show_parent_entry,
        )
        self.session.rescan()

    def destroy(self) -> None:
        self.session = None

    @property
    def is_active(self) -> bool:
        return self.session is not None

    def _live_session(self, operation: str) -> BrowserSession:
        if self.session is None:
            raise BrowserNotInitializedError(operation)
        return self.session

    # Queries

    @property
    def current_root(self) -> Path:
        return self._live_session("current_root").current_root

    @property
    def entries(self) -> list[Entry]:
        return self._live_session("entries").entries

    def entry_count(self) -> int:
        return len(self._live_session("entry_count").entries)

    def display_text(self, index: int) -> str:
        """Return the prefixed label for ``entries[index]``.

        ``index`` is not range checked; hosts only ask for rows below
        ``entry_count()``.
        """
        entry = self._live_session("display_text").entries[index]
        if entry.kind is EntryKind.DIRECTORY:
            prefix = self.settings.directory_prefix
        else:
            prefix = self.settings.file_prefix
        return f"{prefix}{entry.name}"

    def matches(self, index: int, tokens: Sequence[str]) -> bool:
        entry = self._live_session("matches").entries[index]
        return self._token_match(tokens, entry.name)

    # Actions

    def handle_action(self, action: Action | ActionKind, selected_index: int | None = None) -> Directive:
        """Apply one host action and return what the host should do next."""
        session = self._live_session("handle_action")
        if isinstance(action, ActionKind):
            action = Action(action)

        kind = action.kind
        if kind is ActionKind.NEXT:
            return NEXT_DIALOG
        if kind is ActionKind.PREVIOUS:
            return PREVIOUS_DIALOG
        if kind is ActionKind.QUICK_SWITCH:
            return switch_mode(action.target_mode if action.target_mode is not None else 0)
        if kind is ActionKind.ACCEPT:
            return self._accept(session, selected_index)
        if kind is ActionKind.DELETE_ENTRY:
            return RELOAD_DIALOG
        return MODE_EXIT

    def _accept(self, session: BrowserSession, selected_index: int | None) -> Directive:
        entry = session.entry_at(selected_index)
        if entry is None:
            return RELOAD_DIALOG
        if entry.kind is EntryKind.DIRECTORY:
            session.enter(entry)
            return RESET_DIALOG
        if entry.kind is EntryKind.FILE:
            self.open_entry(entry)
            return MODE_EXIT
        return RELOAD_DIALOG

    def open_command_for(self, entry: Entry) -> str:
        return build_open_command(entry.path, self.settings.opener)

    def open_entry(self, entry: Entry) -> None:
        """Hand ``entry`` to the launch capability with the current root as cwd."""
        session = self._live_session("open_entry")
        command = self.open_command_for(entry)
        self._launch_detached(session.current_root, command)


__all__ = ["MODE_NAME", "DirectoryBrowser"]
