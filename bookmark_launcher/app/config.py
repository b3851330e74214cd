"""Application configuration loaded from .env and defaults."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "bookmark-launcher"


class Settings(BaseSettings):
    browser_kind: str = "Chrome"
    browser_profile: str = "Default"
    bookmarks_root: str = "bookmark_bar"
    data_dir: Path = DEFAULT_DATA_DIR
    db_path: Optional[Path] = None
    log_path: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def cache_db_path(self) -> Path:
        return self.db_path or self.data_dir / "cache.db"

    @property
    def log_file_path(self) -> Path:
        return self.log_path or self.data_dir / "logs" / "app.log"

    class Config:
        env_prefix = "BOOKMARKS_"
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"


def get_settings() -> Settings:
    return Settings()
