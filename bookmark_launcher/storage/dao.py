"""Data Access Objects for the durable key-value cache."""
import json
from datetime import datetime
from typing import Any, Optional

from bookmark_launcher.storage.db import get_connection


class CacheDAO:
    """Named JSON fields that survive across sessions.

    Every ``set`` commits before returning, so there is nothing to flush.
    """

    def get(self, key: str) -> Optional[Any]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT value FROM cache WHERE key = ?", (key,)
            ).fetchone()
            if row is None:
                return None
            return json.loads(row["value"])
        finally:
            conn.close()

    def set(self, key: str, value: Any) -> None:
        conn = get_connection()
        try:
            conn.execute(
                """INSERT INTO cache (key, value, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                     value=excluded.value,
                     updated_at=excluded.updated_at
                """,
                (key, json.dumps(value), datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> bool:
        conn = get_connection()
        try:
            cur = conn.execute("DELETE FROM cache WHERE key = ?", (key,))
            conn.commit()
            return cur.rowcount > 0
        finally:
            conn.close()

    def updated_at(self, key: str) -> Optional[str]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT updated_at FROM cache WHERE key = ?", (key,)
            ).fetchone()
            return row["updated_at"] if row else None
        finally:
            conn.close()
