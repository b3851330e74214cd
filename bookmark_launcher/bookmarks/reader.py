"""Read a Chromium ``Bookmarks`` JSON export into a Folder tree."""
import json
import logging
from pathlib import Path

from bookmark_launcher.app.errors import BookmarkFileError
from bookmark_launcher.bookmarks.models import Folder, Link, Node

logger = logging.getLogger("bookmark_launcher.bookmarks.reader")

ROOT_NAMES: tuple[str, ...] = ("bookmark_bar", "other", "synced", "trash")


def parse_node(raw: dict) -> Node:
    """Build a Folder or Link from one JSON node, recursing into children."""
    if not isinstance(raw, dict):
        raise BookmarkFileError(f"Bookmark node is not an object: {raw!r}")

    common = {
        "id": str(raw.get("id", "")),
        "name": raw.get("name", ""),
        "guid": raw.get("guid", ""),
        "date_added": raw.get("date_added", ""),
        "date_last_used": raw.get("date_last_used", ""),
        "date_modified": raw.get("date_modified"),
        "meta_info": dict(raw.get("meta_info") or {}),
    }

    node_type = raw.get("type")
    if node_type == "folder":
        children = tuple(parse_node(child) for child in raw.get("children") or [])
        return Folder(children=children, **common)
    if node_type == "url":
        url = raw.get("url")
        if not url:
            raise BookmarkFileError(f"Bookmark {common['name']!r} has no url")
        return Link(url=url, **common)
    raise BookmarkFileError(f"Unknown bookmark node type: {node_type!r}")


def count_nodes(folder: Folder) -> tuple[int, int]:
    """Return ``(folders, links)`` below *folder*, not counting itself."""
    folders = links = 0
    stack = list(folder.children)
    while stack:
        node = stack.pop()
        if isinstance(node, Folder):
            folders += 1
            stack.extend(node.children)
        else:
            links += 1
    return folders, links


def read_bookmarks(path: Path, root: str = "bookmark_bar") -> Folder:
    """Load *path* and return the folder stored under ``roots[root]``.

    Raises:
        BookmarkFileError: file missing, not JSON, root missing or malformed.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise BookmarkFileError(f"Bookmarks file not found: {path}") from exc
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BookmarkFileError(f"Cannot read bookmarks file {path}: {exc}") from exc

    roots = data.get("roots") if isinstance(data, dict) else None
    if not isinstance(roots, dict):
        raise BookmarkFileError(f"No 'roots' object in {path}")
    if root not in roots:
        raise BookmarkFileError(
            f"Bookmark root {root!r} not found in {path}; "
            f"available: {', '.join(sorted(roots))}"
        )

    tree = parse_node(roots[root])
    if not isinstance(tree, Folder):
        raise BookmarkFileError(f"Bookmark root {root!r} is not a folder")

    folders, links = count_nodes(tree)
    logger.info("Loaded %s from %s: %d folders, %d links", root, path, folders, links)
    return tree
