"""
Database configuration and session management.
"""

from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool

from timetrack.config import settings


def enable_sqlite_savepoints(target: Engine) -> Engine:
    """
    Let SQLAlchemy, not pysqlite, emit BEGIN so SAVEPOINTs nest correctly.
    Needed for ``Session.begin_nested`` on SQLite.
    """

    @event.listens_for(target, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(target, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return target


def build_engine(database_url: str, **kwargs) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        return enable_sqlite_savepoints(create_engine(database_url, **kwargs))
    kwargs.setdefault("poolclass", NullPool)
    return create_engine(database_url, **kwargs)


# Create SQLAlchemy engine
engine = build_engine(settings.database_url, echo=settings.debug)

# Create SessionLocal class
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Create declarative base
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create all tables that do not exist yet."""
    # Registers the mapped classes on Base.metadata
    from timetrack.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind=None) -> None:
    from timetrack.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)
