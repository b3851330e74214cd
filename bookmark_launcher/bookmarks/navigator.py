"""Folder-by-folder navigation over a loaded bookmark tree.

The navigator never copies or mutates the tree: ``current`` is always some
folder's ``children`` tuple and ``history`` holds the tuples it replaced,
most recent last.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from bookmark_launcher.app.errors import IllegalState
from bookmark_launcher.bookmarks.models import Folder, Link, Node

logger = logging.getLogger("bookmark_launcher.bookmarks.navigator")


# ── Selections (what the user picked) ────────────────────────────


@dataclass(frozen=True)
class Back:
    """The synthetic "go back" entry."""


BACK = Back()


@dataclass(frozen=True)
class Select:
    node: Node


Selection = Union[Back, Select]


# ── Outcomes (what the selection did) ────────────────────────────


@dataclass(frozen=True)
class DescendedInto:
    folder: Folder


@dataclass(frozen=True)
class WentBack:
    pass


@dataclass(frozen=True)
class Opened:
    link: Link


Outcome = Union[DescendedInto, WentBack, Opened]


@dataclass(frozen=True)
class Entry:
    """One selectable row of the current level."""

    label: str
    selection: Selection
    is_folder: bool = False
    url: Optional[str] = None
    nickname: Optional[str] = None

    @property
    def is_back(self) -> bool:
        return isinstance(self.selection, Back)


def entry_for(node: Node) -> Entry:
    if isinstance(node, Folder):
        return Entry(label=node.name, selection=Select(node), is_folder=True)
    if isinstance(node, Link):
        return Entry(
            label=node.name,
            selection=Select(node),
            url=node.url,
            nickname=node.nickname,
        )
    raise TypeError(f"Not a bookmark node: {node!r}")


class Navigator:
    def __init__(self, root: Folder):
        self.current: Sequence[Node] = root.children
        self.history: list[Sequence[Node]] = []
        self._path: list[str] = []

    @property
    def at_root(self) -> bool:
        return not self.history

    @property
    def depth(self) -> int:
        return len(self.history)

    @property
    def path(self) -> tuple[str, ...]:
        """Names of the folders descended into, outermost first."""
        return tuple(self._path)

    def current_entries(self) -> list[Entry]:
        entries = [entry_for(node) for node in self.current]
        if self.history:
            entries.insert(0, Entry(label="⤴ ..", selection=BACK))
        return entries

    def select(self, selection: Selection) -> Outcome:
        if isinstance(selection, Back):
            if not self.history:
                raise IllegalState("Cannot go back from the root folder")
            self.current = self.history.pop()
            self._path.pop()
            logger.debug("Went back to depth %d", self.depth)
            return WentBack()

        if isinstance(selection, Select):
            node = selection.node
            if isinstance(node, Folder):
                self.history.append(self.current)
                self.current = node.children
                self._path.append(node.name)
                logger.debug("Descended into %r (depth %d)", node.name, self.depth)
                return DescendedInto(node)
            if isinstance(node, Link):
                return Opened(node)
            raise TypeError(f"Not a bookmark node: {node!r}")

        raise TypeError(f"Not a selection: {selection!r}")
