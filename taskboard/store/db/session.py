import logging
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine

from ..core.config import settings

logger = logging.getLogger(__name__)

_SQLITE_PREFIX = "sqlite:///"

# Sync endpoints run in a threadpool; SQLite connections must be shareable across threads.
_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=_connect_args)


def _ensure_sqlite_dir(url: str) -> None:
    if not url.startswith(_SQLITE_PREFIX):
        return
    path = url[len(_SQLITE_PREFIX):]
    if not path or path == ":memory:":
        return
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def init_db() -> None:
    from . import models  # noqa: F401
    _ensure_sqlite_dir(settings.DATABASE_URL)
    SQLModel.metadata.create_all(engine)
    logger.info("Store tables ready url=%s", settings.DATABASE_URL)


def get_session():
    with Session(engine) as session:
        yield session
