"""CLI entry point for Bookmark Launcher."""
import argparse
import logging
import sys

from bookmark_launcher.app.browsers import SUPPORTED_BROWSERS, BrowserFiles, get_browser_files
from bookmark_launcher.app.config import get_settings
from bookmark_launcher.app.errors import BookmarkLauncherError
from bookmark_launcher.app.logging import setup_logging
from bookmark_launcher.app.paths import ensure_dirs
from bookmark_launcher.bookmarks.reader import ROOT_NAMES
from bookmark_launcher.storage.db import init_db

logger = logging.getLogger("bookmark_launcher.cli")


def _browser_files(args) -> BrowserFiles:
    settings = get_settings()
    browser = args.browser or settings.browser_kind
    profile = args.profile or settings.browser_profile
    return get_browser_files(browser, profile)


def _show_status(message: str) -> None:
    sys.stderr.write(f"\r\x1b[K{message}")
    sys.stderr.flush()


def _favicon_cache(files: BrowserFiles, picker):
    from bookmark_launcher.favicons.cache import FaviconCache, ask_when_locked

    return FaviconCache(
        files.favicons_db,
        resolve_locked=lambda: ask_when_locked(picker),
        status=_show_status,
    )


def cmd_browse(args):
    """Browse bookmarks and open the chosen link."""
    from bookmark_launcher.bookmarks.navigator import Navigator
    from bookmark_launcher.bookmarks.reader import read_bookmarks
    from bookmark_launcher.picker.textual_picker import TextualPicker
    from bookmark_launcher.session.loop import run_session

    files = _browser_files(args)
    root_name = args.root or get_settings().bookmarks_root
    root = read_bookmarks(files.bookmarks_json, root=root_name)

    picker = TextualPicker()
    link = run_session(
        Navigator(root),
        _favicon_cache(files, picker),
        picker,
        refresh_first=args.refresh_favicons,
    )
    if link is not None:
        print(f"Opened {link.name}: {link.url}")


def cmd_favicons(args):
    """Refresh or clear the cached favicons."""
    from bookmark_launcher.favicons.cache import CACHE_KEY
    from bookmark_launcher.picker.textual_picker import TextualPicker

    files = _browser_files(args)
    cache = _favicon_cache(files, TextualPicker())

    if args.action == "refresh":
        favicons = cache.load(force_refresh=True)
        updated = cache.dao.updated_at(CACHE_KEY)
        print(f"  {len(favicons)} favicons (cache updated {updated or 'never'})")
    elif args.action == "clear":
        if cache.clear():
            print("Favicon cache cleared.")
        else:
            print("Favicon cache was already empty.")


def cmd_paths(args):
    """Print where the bookmark and favicon files are expected."""
    files = _browser_files(args)
    print(f"  bookmarks: {files.bookmarks_json}")
    print(f"  favicons:  {files.favicons_db}")


def _add_browser_args(p: argparse.ArgumentParser) -> None:
    settings = get_settings()
    p.add_argument(
        "--browser", default=None, choices=list(SUPPORTED_BROWSERS),
        help=f"Browser to read (default: {settings.browser_kind}, from BOOKMARKS_BROWSER_KIND)",
    )
    p.add_argument(
        "--profile", default=None,
        help=f"Browser profile directory name (default: {settings.browser_profile}, "
             "from BOOKMARKS_BROWSER_PROFILE)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookmark-launcher",
        description="Bookmark Launcher: browse browser bookmarks from the terminal",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # browse
    p_browse = subparsers.add_parser("browse", help="Browse bookmarks")
    _add_browser_args(p_browse)
    p_browse.add_argument("--root", default=None, choices=list(ROOT_NAMES))
    p_browse.add_argument(
        "--refresh-favicons", action="store_true",
        help="Re-read the favicon database instead of using the cache",
    )
    p_browse.set_defaults(func=cmd_browse)

    # favicons
    p_favicons = subparsers.add_parser("favicons", help="Manage the favicon cache")
    p_favicons.add_argument("action", choices=["refresh", "clear"])
    _add_browser_args(p_favicons)
    p_favicons.set_defaults(func=cmd_favicons)

    # paths
    p_paths = subparsers.add_parser("paths", help="Show resolved browser file paths")
    _add_browser_args(p_paths)
    p_paths.set_defaults(func=cmd_paths)

    return parser


def main(argv=None):
    setup_logging()
    ensure_dirs()
    init_db()

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except BookmarkLauncherError as exc:
        logger.info("Aborting: %s", exc)
        parser.exit(1, f"bookmark-launcher: {exc}\n")


if __name__ == "__main__":
    sys.exit(main())
