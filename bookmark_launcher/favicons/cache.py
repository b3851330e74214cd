"""Favicon map memoized in the durable cache, with a lock fallback.

The browser usually keeps its ``Favicons`` database locked while running.
When that happens the user decides between retrying (after closing the
browser) and continuing without images for this load.
"""
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from bookmark_launcher.app.errors import StoreLocked
from bookmark_launcher.favicons.store import build_favicon_map, query_favicons
from bookmark_launcher.picker.base import Choice, Picker
from bookmark_launcher.storage.dao import CacheDAO

logger = logging.getLogger("bookmark_launcher.favicons.cache")

CACHE_KEY = "favicons"

LOADING_HINT = "Loading Favicons..."

LOCKED_HINT = (
    "Cannot read the Favicons database while the browser is still running. "
    "Please close it completely to cache the Favicons and continue to try again."
)


class LockChoice(str, Enum):
    RETRY = "retry"
    WITHOUT = "without"


def ask_when_locked(picker: Picker) -> LockChoice:
    """Let the user choose between retrying and going on without favicons."""
    choice = picker.choose(
        "Favicons database is locked",
        [
            Choice(name="Retry", value=LockChoice.RETRY),
            Choice(name="Continue without Favicons", value=LockChoice.WITHOUT),
        ],
        hint=LOCKED_HINT,
    )
    return LockChoice.RETRY if choice == LockChoice.RETRY else LockChoice.WITHOUT


class FaviconCache:
    """Loads ``{page_url: data_uri}`` and keeps the last good map durable.

    *resolve_locked* is consulted each time the store reports a lock;
    *query* is the store reader, replaceable in tests. *status* is shown
    LOADING_HINT before each store read and an empty string after it.
    """

    def __init__(
        self,
        db_path: Path,
        resolve_locked: Callable[[], LockChoice],
        dao: Optional[CacheDAO] = None,
        query: Callable[[Path], Iterable[tuple[str, bytes]]] = query_favicons,
        status: Optional[Callable[[str], None]] = None,
    ):
        self.db_path = db_path
        self.resolve_locked = resolve_locked
        self.dao = dao or CacheDAO()
        self.query = query
        self.status = status or (lambda message: None)

    def cached(self) -> Optional[dict[str, str]]:
        return self.dao.get(CACHE_KEY)

    def load(self, force_refresh: bool = False) -> dict[str, str]:
        if not force_refresh:
            cached = self.cached()
            if cached is not None:
                logger.debug("Using %d cached favicons", len(cached))
                return cached

        while True:
            logger.info("Loading favicons from %s", self.db_path)
            self.status(LOADING_HINT)
            try:
                rows = self.query(self.db_path)
            except StoreLocked:
                rows = None
            finally:
                self.status("")

            if rows is None:
                logger.warning("Favicon database is locked: %s", self.db_path)
                choice = self.resolve_locked()
                logger.info("Locked favicon database, user chose %s", choice.value)
                if choice is LockChoice.RETRY:
                    continue
                return {}

            favicons = build_favicon_map(rows)
            self.dao.set(CACHE_KEY, favicons)
            logger.info("Cached %d favicons", len(favicons))
            return favicons

    def clear(self) -> bool:
        return self.dao.delete(CACHE_KEY)
