"""Interactive loop: navigator entries in, picker selections out."""
import logging
import webbrowser
from typing import Callable, Mapping, Optional, Sequence

from bookmark_launcher.bookmarks.models import Link
from bookmark_launcher.bookmarks.navigator import (
    Entry,
    Navigator,
    Opened,
)
from bookmark_launcher.favicons.cache import FaviconCache
from bookmark_launcher.picker.base import Choice, Picker, Shortcut

logger = logging.getLogger("bookmark_launcher.session.loop")

PROMPT = "Select A Bookmark!"

REFRESH_FAVICONS = "refresh-favicons"

REFRESH_SHORTCUT = Shortcut(key="ctrl+u", name="Update Favicons", value=REFRESH_FAVICONS)


def build_choices(entries: Sequence[Entry], favicons: Mapping[str, str]) -> list[Choice]:
    """Turn navigator entries into picker choices, attaching favicons by URL."""
    choices: list[Choice] = []
    for entry in entries:
        if entry.is_back:
            choices.append(Choice(name=entry.label, description="Go back", value=entry.selection))
        elif entry.is_folder:
            choices.append(Choice(name=entry.label, value=entry.selection, is_folder=True))
        else:
            choices.append(
                Choice(
                    name=entry.label,
                    value=entry.selection,
                    description=entry.url,
                    keyword=entry.nickname,
                    image=favicons.get(entry.url) if entry.url else None,
                )
            )
    return choices


def prompt_title(navigator: Navigator) -> str:
    if navigator.at_root:
        return PROMPT
    return f"{PROMPT}  /{'/'.join(navigator.path)}"


def open_url(url: str) -> None:
    webbrowser.open(url)


def run_session(
    navigator: Navigator,
    favicon_cache: FaviconCache,
    picker: Picker,
    opener: Callable[[str], None] = open_url,
    refresh_first: bool = False,
) -> Optional[Link]:
    """Run until a link is opened (returned) or the picker is dismissed (None)."""
    favicons = favicon_cache.load(force_refresh=refresh_first)

    while True:
        choices = build_choices(navigator.current_entries(), favicons)
        value = picker.choose(
            prompt_title(navigator),
            choices,
            shortcuts=(REFRESH_SHORTCUT,),
        )

        if value is None:
            logger.info("Picker dismissed at depth %d", navigator.depth)
            return None

        if value == REFRESH_FAVICONS:
            favicons = favicon_cache.load(force_refresh=True)
            continue

        outcome = navigator.select(value)
        if isinstance(outcome, Opened):
            logger.info("Opening %s", outcome.link.url)
            opener(outcome.link.url)
            return outcome.link
