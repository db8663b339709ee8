"""Exception hierarchy for dirbrowse."""

from __future__ import annotations


class DirbrowseError(Exception):
    """Base class for errors raised by dirbrowse."""


class BrowserNotInitializedError(DirbrowseError):
    """Raised when a host queries a browser before ``init()`` or after ``destroy()``."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() called without a live browsing session")
        self.operation = operation


__all__ = ["DirbrowseError", "BrowserNotInitializedError"]
