"""Exception types raised across the launcher."""
from pathlib import Path


class BookmarkLauncherError(Exception):
    """Base class for every error the CLI reports as a one-line message."""


class ConfigurationError(BookmarkLauncherError):
    """Unsupported browser/platform, or the browser is not installed."""


class BookmarkFileError(BookmarkLauncherError):
    """The bookmark export is missing, malformed, or has an unknown shape."""


class StoreLocked(BookmarkLauncherError):
    """The favicon database is held by the running browser."""

    def __init__(self, path: Path):
        super().__init__(f"Favicon database is locked: {path}")
        self.path = path


class StoreReadError(BookmarkLauncherError):
    """Any favicon database failure other than a lock."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read favicon database {path}: {reason}")
        self.path = path


class IllegalState(BookmarkLauncherError):
    """Navigation was asked to do something its own entries never offer."""
