"""Full-screen Textual picker.

Terminals cannot draw the favicon images, so a choice that carries one is
marked with a glyph in front of its name.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Key
from textual.widgets import Footer, OptionList, Static
from textual.widgets.option_list import Option

from bookmark_launcher.picker.base import Choice, Picker, Shortcut

FOLDER_GLYPH = "\U0001F4C1"
FAVICON_GLYPH = "◆"


def option_prompt(choice: Choice) -> Text:
    """Render one choice as a single rich line."""
    text = Text()
    if choice.is_folder:
        text.append(f"{FOLDER_GLYPH} ")
        text.append(choice.name, style="bold")
        return text

    text.append(f"{FAVICON_GLYPH} " if choice.image else "  ", style="cyan")
    text.append(choice.name)
    if choice.keyword:
        text.append(f"  [{choice.keyword}]", style="magenta")
    if choice.description:
        text.append(f"  {choice.description}", style="dim")
    return text


def shortcut_bar(shortcuts: Sequence[Shortcut]) -> str:
    return "  ".join(f"{s.key}: {s.name}" for s in shortcuts)


class PickerApp(App):
    """Shows one list and exits with the picked value."""

    TITLE = "Bookmarks"

    BINDINGS = [
        Binding("escape", "dismiss_picker", "Close", priority=True),
    ]

    def __init__(
        self,
        title: str,
        choices: Sequence[Choice],
        hint: str = "",
        shortcuts: Sequence[Shortcut] = (),
    ):
        super().__init__()
        self.prompt_title = title
        self.choices = list(choices)
        self.hint = hint
        self.shortcuts = {s.key: s for s in shortcuts}

    def compose(self) -> ComposeResult:
        yield Static(Text(self.prompt_title, style="bold"), id="title")
        if self.hint:
            yield Static(Text(self.hint, style="italic"), id="hint")
        yield OptionList(
            *[Option(option_prompt(c), id=str(i)) for i, c in enumerate(self.choices)],
            id="choices",
        )
        if self.shortcuts:
            yield Static(shortcut_bar(list(self.shortcuts.values())), id="shortcuts")
        yield Footer()

    def on_mount(self) -> None:
        option_list = self.query_one(OptionList)
        option_list.focus()
        if self.choices:
            option_list.highlighted = 0

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self.choices[event.option_index].value)

    def on_key(self, event: Key) -> None:
        shortcut = self.shortcuts.get(event.key)
        if shortcut is not None:
            event.stop()
            self.exit(shortcut.value)

    def action_dismiss_picker(self) -> None:
        self.exit(None)


class TextualPicker(Picker):
    def choose(
        self,
        title: str,
        choices: Sequence[Choice],
        *,
        hint: str = "",
        shortcuts: Sequence[Shortcut] = (),
    ) -> Optional[Any]:
        app = PickerApp(title, choices, hint=hint, shortcuts=shortcuts)
        return app.run()
