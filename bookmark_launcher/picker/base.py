"""Picker interface: show a list of choices and return the chosen value."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class Choice:
    name: str
    value: Any
    description: Optional[str] = None
    keyword: Optional[str] = None
    image: Optional[str] = None
    is_folder: bool = False


@dataclass(frozen=True)
class Shortcut:
    """A key that ends the current prompt with ``value`` instead of a choice."""

    key: str
    name: str
    value: Any


class Picker(ABC):
    """Abstract base for interactive pickers."""

    @abstractmethod
    def choose(
        self,
        title: str,
        choices: Sequence[Choice],
        *,
        hint: str = "",
        shortcuts: Sequence[Shortcut] = (),
    ) -> Optional[Any]:
        """Block until the user picks a choice or presses a shortcut.

        Returns the choice's ``value``, the shortcut's ``value``, or None if
        the user dismissed the picker.
        """
        ...
