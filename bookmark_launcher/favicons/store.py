"""Read favicon bitmaps from the browser's ``Favicons`` SQLite database.

The database is opened read-only with no busy timeout, so a browser that
holds a lock on it is reported straight away as StoreLocked instead of
blocking the picker.
"""
import base64
import logging
import sqlite3
from pathlib import Path
from typing import Iterable
from urllib.parse import quote

from bookmark_launcher.app.errors import StoreLocked, StoreReadError

logger = logging.getLogger("bookmark_launcher.favicons.store")

FAVICON_QUERY = (
    "SELECT page_url, image_data FROM icon_mapping "
    "INNER JOIN favicons ON favicons.id = icon_mapping.icon_id "
    "INNER JOIN favicon_bitmaps fb ON favicons.id = fb.icon_id"
)

DATA_URI_PREFIX = "data:image/jpeg;base64,"

# Primary result codes; extended codes keep these in the low byte.
_SQLITE_BUSY = 5
_SQLITE_LOCKED = 6


def _is_locked(exc: sqlite3.Error) -> bool:
    code = getattr(exc, "sqlite_errorcode", None)
    if code is not None:
        return (code & 0xFF) in (_SQLITE_BUSY, _SQLITE_LOCKED)
    return "locked" in str(exc).lower()


def query_favicons(db_path: Path) -> list[tuple[str, bytes]]:
    """Return every ``(page_url, image_data)`` row in the favicon database.

    Raises:
        StoreLocked: the browser holds a lock on the database.
        StoreReadError: any other SQLite failure, including a missing file.
    """
    conn = None
    try:
        uri = f"file:{quote(Path(db_path).as_posix(), safe='/:')}?mode=ro"
        conn = sqlite3.connect(uri, uri=True, timeout=0)
        rows = conn.execute(FAVICON_QUERY).fetchall()
    except sqlite3.Error as exc:
        if _is_locked(exc):
            raise StoreLocked(db_path) from exc
        raise StoreReadError(db_path, str(exc)) from exc
    finally:
        if conn is not None:
            conn.close()

    logger.info("Read %d favicon rows from %s", len(rows), db_path)
    return [(page_url, bytes(image_data or b"")) for page_url, image_data in rows]


def encode_image(image_data: bytes) -> str:
    return DATA_URI_PREFIX + base64.b64encode(image_data).decode("ascii")


def build_favicon_map(rows: Iterable[tuple[str, bytes]]) -> dict[str, str]:
    """Map page URL to data URI. A URL with several bitmaps keeps the last."""
    favicons: dict[str, str] = {}
    for page_url, image_data in rows:
        if not image_data:
            continue
        favicons[page_url] = encode_image(image_data)
    return favicons
