"""Bookmark tree nodes.

A node is either a :class:`Folder` or a :class:`Link`; no other variant
exists. Both are frozen so the tree loaded at startup can be shared by
reference for the whole session.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Folder:
    id: str
    name: str
    children: tuple[Node, ...] = ()
    guid: str = ""
    date_added: str = ""
    date_last_used: str = ""
    date_modified: Optional[str] = None
    meta_info: dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Link:
    id: str
    name: str
    url: str
    guid: str = ""
    date_added: str = ""
    date_last_used: str = ""
    date_modified: Optional[str] = None
    meta_info: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def nickname(self) -> Optional[str]:
        return self.meta_info.get("Nickname") or None


Node = Union[Folder, Link]
