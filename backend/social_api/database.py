"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides
small helpers used by the application and tests.
"""

from sqlmodel import SQLModel, create_engine, Session
from .config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the threadpool FastAPI runs sync routes in.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, connect_args=_connect_args(settings.DATABASE_URL))


def create_db_and_tables(bind=None):
    """Create the `account` and `message` tables from SQLModel metadata.

    There are no migrations; tables that already exist are left as they
    are. `bind` defaults to the module engine and lets tests point the
    call at their own engine.
    """
    from . import models  # noqa: F401  registers the tables on the metadata
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
