"""Logging setup for daybook.

The root level and the levels of the SQL and storage loggers are read from
Settings, so statement echo can stay quiet while the record stores log at
DEBUG. Call ``setup_logging()`` once before building a workspace.
"""

import logging
import sys

from daybook.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers whose level it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool"),
    "log_level_storage": ("daybook.infrastructure.storage", "daybook.infrastructure.database"),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Set root and per-category levels, adding a stderr handler if none exists."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s, sql=%s, storage=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_storage,
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names give INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
