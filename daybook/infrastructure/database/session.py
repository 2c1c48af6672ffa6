"""SQLAlchemy engine and session configuration for the key-value substrate."""

import logging
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from daybook.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    if not url.startswith("sqlite:///"):
        return
    path = url.removeprefix("sqlite:///")
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def create_storage_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine and make sure the kv_entries table exists."""
    _ensure_sqlite_directory(url)
    engine = create_engine(url, echo=echo, future=True)
    Base.metadata.create_all(engine)
    logger.debug("Storage engine ready: %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, class_=Session, expire_on_commit=False)
