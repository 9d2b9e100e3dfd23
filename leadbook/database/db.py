"""Engine, session factory and connectivity checks for the lead store."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from contextlib import contextmanager

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from leadbook.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()
DATABASE_URL = config.DATABASE_URL
LOCAL_SQLITE_URL = "sqlite:///./leadbook.db"
REQUIRED_TABLES = ("users", "products", "services", "leads", "lead_products", "lead_services")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # Link rows rely on ON DELETE CASCADE, which SQLite only honours with this pragma.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(database_url: str) -> Engine:
    echo = config.DEBUG and config.LOG_LEVEL == "DEBUG"
    if database_url.startswith("sqlite"):
        sqlite_engine = create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=10,
        max_overflow=20,
    )


def _configure_engine(database_url: str) -> None:
    global DATABASE_URL, engine, SessionLocal
    DATABASE_URL = database_url
    engine = _build_engine(database_url)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


_configure_engine(DATABASE_URL)


def get_engine() -> Engine:
    return engine


def get_active_database_url() -> str:
    """URL the engine is bound to, which differs from config after a fallback."""
    return DATABASE_URL


def database_url_scheme(database_url: str | None = None) -> str:
    return (database_url or DATABASE_URL).split("://", 1)[0]


def reset_engine(database_url: str | None = None) -> None:
    """Dispose the current engine and bind a fresh one."""
    engine.dispose()
    _configure_engine(database_url or DATABASE_URL)


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session; handlers commit through their services."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Session for scripts: commit on success, roll back on error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def missing_tables(tables: Iterable[str] = REQUIRED_TABLES) -> list[str]:
    """Tables of the lead schema that do not exist yet."""
    existing = set(inspect(engine).get_table_names())
    return [name for name in tables if name not in existing]


def _ping(target: Engine) -> None:
    with target.connect() as conn:
        conn.execute(text("SELECT 1"))


def verify_database_connection() -> bool:
    """Check the configured database, falling back to local SQLite when allowed."""
    try:
        _ping(engine)
        return True
    except SQLAlchemyError as exc:
        if config.DB_CONNECTIVITY_REQUIRED:
            logger.exception("database.connection_failed", extra={"event": "database.connection_failed"})
            return False
        logger.warning(
            "database.connection_failed.optional",
            extra={"event": "database.connection_failed.optional", "database_url_scheme": database_url_scheme()},
        )
        return _fallback_to_local_sqlite(exc)


def _fallback_to_local_sqlite(original_exc: Exception) -> bool:
    if DATABASE_URL.startswith("sqlite"):
        logger.error("database.connection_failed.details: %s", original_exc)
        return False

    original_url = DATABASE_URL
    reset_engine(LOCAL_SQLITE_URL)
    try:
        _ping(engine)
    except SQLAlchemyError as fallback_exc:
        reset_engine(original_url)
        logger.error("database.connection_fallback.failed: %s", fallback_exc)
        return False

    logger.warning(
        "database.connection_fallback.sqlite",
        extra={"event": "database.connection_fallback.sqlite", "database_url_scheme": "sqlite"},
    )
    return True
