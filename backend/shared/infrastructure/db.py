"""
Database configuration and session management.
Uses SQLAlchemy 2.0 patterns with a pooled synchronous engine.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from shared.config.logging import get_logger
from shared.config.settings import DATABASE_URL, settings
from shared.utils.exceptions import AppException, ConstraintError, StorageError

logger = get_logger(__name__)


def _engine_options(url: str) -> dict[str, Any]:
    """Pool and connection options for the given database URL."""
    if url.startswith("sqlite"):
        # SQLite has no server-side pool or connect timeout
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,  # Wait for a connection from the pool
        "pool_recycle": settings.db_pool_recycle,
        "connect_args": {"connect_timeout": settings.db_connect_timeout},
    }


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked to."""

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(url: str = DATABASE_URL, **overrides: Any) -> Engine:
    """
    Create an engine for ``url``.

    Keyword overrides replace the computed options (e.g. ``poolclass`` in tests).
    """
    options = _engine_options(url)
    options.update(overrides)
    new_engine = create_engine(url, echo=settings.db_echo, **options)
    if new_engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(new_engine)
    return new_engine


# Create engine with connection pooling and timeouts
engine = create_db_engine()

# Session factory
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @router.get("/incidents")
        def list_incidents(db: Session = Depends(get_db)):
            ...

    The session is automatically closed after the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for database sessions outside of FastAPI.

    Usage:
        with get_db_context() as db:
            IncidentService(db).list_all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Safe commit with automatic rollback on failure.

    Raises the original exception after rolling back.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


@contextmanager
def storage_errors(db: Session, operation: str, **log_context: Any) -> Generator[None, None, None]:
    """
    Translate SQLAlchemy failures inside the block into application errors.

    - Application errors raised inside the block roll back and propagate as-is.
    - IntegrityError becomes ConstraintError: missing referenced records as
      well as duplicate links (primary key or unique violations).
    - Any other SQLAlchemyError becomes StorageError (opaque, logged).

    Usage:
        with storage_errors(db, "create incident"):
            db.add(incident)
            safe_commit(db)
    """
    try:
        yield
    except AppException:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        raise ConstraintError(
            f"Integrity constraint violated during {operation}",
            operation=operation,
            cause=str(e.orig),
            **log_context,
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(operation, **log_context) from e
