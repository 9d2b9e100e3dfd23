"""Bring the lead schema to head and seed the default catalog.

Installed as the ``leadbook-init-db`` console script.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

import leadbook.database.db as db_module
from leadbook.core.config import get_config
from leadbook.core.startup import bootstrap
from leadbook.database.seed import seed_catalog
from leadbook.models import Base

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
SQLITE_FILE_PREFIX = "sqlite:///"


def _alembic_config(database_url: str) -> AlembicConfig:
    cfg = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


def sqlite_file(database_url: str) -> Path | None:
    """Path of a file-backed SQLite database, resolved against the project root."""
    if not database_url.startswith(SQLITE_FILE_PREFIX):
        return None
    raw = database_url[len(SQLITE_FILE_PREFIX) :]
    if raw in {"", ":memory:"}:
        return None
    path = Path(raw)
    return path if path.is_absolute() else (PROJECT_ROOT / path).resolve()


def backup_sqlite_file(database_url: str) -> Path | None:
    """Move an incompatible SQLite file aside and rebind the engine to a fresh one."""
    path = sqlite_file(database_url)
    if path is None or not path.exists():
        db_module.reset_engine(database_url)
        return None

    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    backup = path.with_name(f"{path.stem}.backup_{stamp}{path.suffix}")
    db_module.get_engine().dispose()
    path.replace(backup)
    db_module.reset_engine(database_url)
    return backup


def migrate(database_url: str) -> None:
    """Upgrade to head; a local SQLite file that cannot be upgraded is rebuilt."""
    try:
        command.upgrade(_alembic_config(database_url), "head")
    except Exception as exc:
        if sqlite_file(database_url) is None:
            raise
        backup = backup_sqlite_file(database_url)
        logger.warning(
            "database.sqlite.rebuilt",
            extra={"event": "database.sqlite.rebuilt", "database_url_scheme": "sqlite"},
        )
        logger.warning("database.sqlite.rebuilt.details: backup=%s reason=%s", backup, exc)
        command.upgrade(_alembic_config(database_url), "head")


def init_db() -> int:
    """Migrate, create any missing tables and seed the catalog. Returns rows seeded."""
    bootstrap()
    migrate(db_module.get_active_database_url())
    Base.metadata.create_all(bind=db_module.get_engine())
    logger.info("database.schema.ready", extra={"event": "database.schema.ready"})

    if not get_config().SEED_CATALOG:
        return 0
    with db_module.session_scope() as session:
        return seed_catalog(session)


def main() -> None:
    inserted = init_db()
    logger.info("database.init.finished", extra={"event": "database.init.finished", "inserted": inserted})


if __name__ == "__main__":
    main()
