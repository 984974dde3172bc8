from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def _unicode_lower(value):
    return value.lower() if value is not None else None


def register_unicode_lower(engine: Engine) -> None:
    """
    Replace SQLite's ASCII-only lower() with a Unicode-aware one.

    Filters lower-case query values with str.lower(), so the column side must
    fold the same way for case-insensitive matching of names like "Ärger".
    """

    @event.listens_for(engine, "connect")
    def _register(dbapi_conn, _connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower)


def get_engine(sqlite_path: str) -> Engine:
    """
    Open the store read-only.

    The file must already exist: a missing store raises OperationalError on
    first use instead of silently creating an empty database.
    """
    engine_url = f"sqlite:///file:{sqlite_path}?mode=ro&uri=true"
    engine = create_engine(engine_url, future=True)
    register_unicode_lower(engine)
    return engine


def get_session(sqlite_path: str) -> Session:
    """Get a SQLAlchemy session (caller must close it)."""
    engine = get_engine(sqlite_path)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)()


@contextmanager
def session_context(sqlite_path: str) -> Generator[Session, None, None]:
    """
    Context manager for read-only SQLAlchemy sessions.

    One session per request; the service never writes, so nothing is
    committed. Any open transaction is rolled back on exit.

    Usage:
        with session_context(sqlite_path) as session:
            resources = list_resources(session)
    """
    session = get_session(sqlite_path)
    try:
        yield session
    finally:
        session.rollback()
        session.close()
