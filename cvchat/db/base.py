"""Database configuration and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from cvchat.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# Create engine lazily so tests can swap in their own
_engine = None
_SessionLocal = None


def get_engine():
    """Get or create database engine (in-memory SQLite when DATABASE_URL is unset)."""
    global _engine
    if _engine is None:
        if settings.database_url:
            _engine = create_engine(
                settings.database_url,
                pool_pre_ping=True,  # Test connections before use
                pool_recycle=300,  # Recycle connections after 5 minutes
            )
        else:
            # One shared connection, otherwise every session sees an empty database
            _engine = create_engine(
                "sqlite://",
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
    return _engine


def get_session_factory():
    """Get or create session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create tables and seed the default profile."""
    from cvchat.db import store, tables  # noqa: F401

    Base.metadata.create_all(bind=get_engine())

    db = get_session_factory()()
    try:
        store.seed_default_profile(db)
    finally:
        db.close()
