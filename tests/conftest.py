"""Shared test fixtures for Bookmark Launcher tests."""
import json
import sqlite3
from pathlib import Path
from unittest.mock import patch

import pytest

from bookmark_launcher.app.config import Settings
from bookmark_launcher.bookmarks.models import Folder, Link
from bookmark_launcher.storage.db import init_db


@pytest.fixture()
def tmp_settings(tmp_path):
    """Create a Settings instance backed by a temporary directory.

    Patches get_settings globally so all modules use the temp paths.
    """
    settings = Settings(
        browser_kind="Chrome",
        browser_profile="Default",
        bookmarks_root="bookmark_bar",
        data_dir=tmp_path / "data",
    )
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    with patch("bookmark_launcher.app.config.get_settings", return_value=settings):
        with patch("bookmark_launcher.storage.db.get_settings", return_value=settings):
            init_db()
            yield settings


@pytest.fixture()
def sample_tree():
    """Root folder ``{A: folder[{B: link http://x}], C: link http://y}``."""
    b = Link(id="3", name="B", url="http://x")
    a = Folder(id="2", name="A", children=(b,))
    c = Link(id="4", name="C", url="http://y", meta_info={"Nickname": "why"})
    return Folder(id="1", name="Bookmarks bar", children=(a, c))


def _chrome_node(node: dict, next_id: list) -> dict:
    next_id[0] += 1
    out = {
        "id": str(next_id[0]),
        "guid": f"guid-{next_id[0]}",
        "name": node["name"],
        "date_added": "13300000000000000",
        "date_last_used": "0",
    }
    if "children" in node:
        out["type"] = "folder"
        out["date_modified"] = "13300000000000001"
        out["children"] = [_chrome_node(c, next_id) for c in node["children"]]
    else:
        out["type"] = "url"
        out["url"] = node["url"]
        if "nickname" in node:
            out["meta_info"] = {"Nickname": node["nickname"]}
    return out


@pytest.fixture()
def write_bookmarks(tmp_path):
    """Return a helper that writes a Chromium-style Bookmarks JSON file.

    Usage: ``write_bookmarks(bookmark_bar=[{"name": ..., "url": ...}, ...])``
    where folders are ``{"name": ..., "children": [...]}``.
    """

    def _write(bookmark_bar=(), other=(), path: Path = None) -> Path:
        counter = [0]
        roots = {
            "bookmark_bar": _chrome_node({"name": "Bookmarks bar", "children": list(bookmark_bar)}, counter),
            "other": _chrome_node({"name": "Other bookmarks", "children": list(other)}, counter),
            "synced": _chrome_node({"name": "Mobile bookmarks", "children": []}, counter),
        }
        target = path or tmp_path / "Bookmarks"
        target.write_text(
            json.dumps({"checksum": "abc", "roots": roots, "version": 1}),
            encoding="utf-8",
        )
        return target

    return _write


@pytest.fixture()
def make_favicon_db(tmp_path):
    """Return a helper that builds a Favicons SQLite file from ``{url: bytes}``."""

    def _make(icons: dict, path: Path = None) -> Path:
        db_path = path or tmp_path / "Favicons"
        conn = sqlite3.connect(str(db_path))
        conn.execute("CREATE TABLE favicons (id INTEGER PRIMARY KEY, url TEXT)")
        conn.execute("CREATE TABLE icon_mapping (id INTEGER PRIMARY KEY, page_url TEXT, icon_id INTEGER)")
        conn.execute(
            "CREATE TABLE favicon_bitmaps "
            "(id INTEGER PRIMARY KEY, icon_id INTEGER, image_data BLOB)"
        )
        for icon_id, (page_url, image) in enumerate(icons.items(), start=1):
            conn.execute(
                "INSERT INTO favicons (id, url) VALUES (?, ?)",
                (icon_id, f"{page_url}/favicon.ico"),
            )
            conn.execute(
                "INSERT INTO icon_mapping (page_url, icon_id) VALUES (?, ?)",
                (page_url, icon_id),
            )
            conn.execute(
                "INSERT INTO favicon_bitmaps (icon_id, image_data) VALUES (?, ?)",
                (icon_id, image),
            )
        conn.commit()
        conn.close()
        return db_path

    return _make
