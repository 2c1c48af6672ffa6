import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)

MEMORY_STORAGE_URL = "memory://"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Daybook"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Key-value substrate. "memory://" keeps everything in process memory,
    # anything else is handed to SQLAlchemy as a database URL.
    storage_url: str = "sqlite:///data/daybook.db"
    storage_echo_sql: bool = False

    # Key prefix used for collections while nobody is signed in
    guest_scope: str = "guest"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_storage: str = "INFO"          # record stores and substrate adapters

    model_config = {
        "env_prefix": "DAYBOOK_",
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def uses_memory_storage(self) -> bool:
        return self.storage_url.strip() == MEMORY_STORAGE_URL

    def model_post_init(self, __context: object) -> None:
        if not self.guest_scope.strip():
            _config_logger.warning("Empty guest_scope configured, falling back to 'guest'")
            object.__setattr__(self, "guest_scope", "guest")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
