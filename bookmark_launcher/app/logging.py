"""Logging setup: a log file for everything, stderr for warnings.

The picker owns the terminal while it runs, so INFO-level chatter goes to
the log file only.
"""
import logging
import sys

from bookmark_launcher.app.config import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging() -> None:
    settings = get_settings()
    log_path = settings.log_file_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger("bookmark_launcher")
    root.setLevel(settings.log_level.upper())
    if root.handlers:
        return

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(file_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(stderr_handler)
