"""Browser installation lookup.

Maps a (browser, platform) pair to the profile directory that holds the
``Bookmarks`` JSON export and the ``Favicons`` SQLite database.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from bookmark_launcher.app.errors import ConfigurationError

SUPPORTED_BROWSERS: tuple[str, ...] = ("Chrome", "Vivaldi")

# Path parts below the user's home directory, profile name appended last.
_INSTALL_DIRS: dict[tuple[str, str], tuple[str, ...]] = {
    ("Chrome", "linux"): (".config", "google-chrome"),
    ("Chrome", "darwin"): ("Library", "Application Support", "Google", "Chrome"),
    ("Chrome", "win32"): ("AppData", "Local", "Google", "Chrome", "User Data"),
    ("Vivaldi", "linux"): (".config", "vivaldi"),
    ("Vivaldi", "darwin"): ("Library", "Application Support", "Vivaldi"),
    ("Vivaldi", "win32"): ("AppData", "Local", "Vivaldi", "User Data"),
}


@dataclass(frozen=True)
class BrowserFiles:
    """The two files the launcher reads from a browser profile."""

    bookmarks_json: Path
    favicons_db: Path


def normalize_platform(platform: str) -> str:
    """Collapse ``sys.platform`` variants (``linux2``, ``cygwin``...) to a lookup key."""
    platform = platform.lower()
    for key in ("linux", "darwin", "win32"):
        if platform.startswith(key):
            return key
    if platform.startswith("cygwin"):
        return "win32"
    return platform


def get_install_dir(
    browser: str,
    profile: str = "Default",
    platform: str | None = None,
    home: Path | None = None,
) -> Path:
    """Return the profile directory for *browser* on *platform*.

    Raises ConfigurationError when the combination is unknown.
    """
    platform = platform or sys.platform
    home = home or Path.home()
    parts = _INSTALL_DIRS.get((browser, normalize_platform(platform)))
    if parts is None:
        raise ConfigurationError(
            f"It is unknown where the {browser} bookmarks live on platform "
            f"{platform}. Supported browsers: {', '.join(SUPPORTED_BROWSERS)}"
        )
    return home.joinpath(*parts, profile)


def get_browser_files(
    browser: str,
    profile: str = "Default",
    platform: str | None = None,
    home: Path | None = None,
) -> BrowserFiles:
    """Locate the bookmark and favicon files, checking the profile exists."""
    install_dir = get_install_dir(browser, profile, platform, home)
    if not install_dir.is_dir():
        raise ConfigurationError(
            f"{browser} bookmarks path determined to be at '{install_dir}', "
            f"but nothing exists at that location. Is {browser} installed?"
        )
    return BrowserFiles(
        bookmarks_json=install_dir / "Bookmarks",
        favicons_db=install_dir / "Favicons",
    )
