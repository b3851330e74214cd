"""Path utilities for ensuring directories exist."""
from bookmark_launcher.app.config import get_settings


def ensure_dirs() -> None:
    settings = get_settings()
    for d in [
        settings.data_dir,
        settings.cache_db_path.parent,
        settings.log_file_path.parent,
    ]:
        d.mkdir(parents=True, exist_ok=True)
