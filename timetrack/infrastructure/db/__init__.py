"""
Database infrastructure: engine, session factory and ORM models.
"""

from .database import Base, engine, SessionLocal, get_db, init_db, drop_db, build_engine

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "init_db",
    "drop_db",
    "build_engine",
]
