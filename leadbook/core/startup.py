"""Startup checks run before the API serves requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from leadbook.core.config import get_config
from leadbook.core.logging_config import configure_logging
from leadbook.database.db import (
    database_url_scheme,
    get_active_database_url,
    missing_tables,
    verify_database_connection,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartupReport:
    database_ok: bool
    database_url_scheme: str
    missing_tables: list[str] = field(default_factory=list)

    @property
    def schema_ready(self) -> bool:
        return self.database_ok and not self.missing_tables


def validate_startup_config() -> StartupReport:
    """Check connectivity and schema; raise only when the database is required."""
    config = get_config()
    database_ok = verify_database_connection()
    if not database_ok and config.DB_CONNECTIVITY_REQUIRED:
        raise RuntimeError("Database connectivity check failed.")

    scheme = database_url_scheme(get_active_database_url())
    absent = missing_tables() if database_ok else []
    report = StartupReport(database_ok=database_ok, database_url_scheme=scheme, missing_tables=absent)

    if not database_ok:
        logger.warning(
            "startup.database.connectivity_optional_failed",
            extra={"event": "startup.database.connectivity_optional_failed"},
        )
    if absent:
        # Run `leadbook-init-db` to migrate and seed the catalog.
        logger.warning(
            "startup.database.schema_missing",
            extra={"event": "startup.database.schema_missing", "count": len(absent)},
        )
    if config.is_production and scheme == "sqlite":
        logger.warning("startup.production.sqlite_detected", extra={"event": "startup.production.sqlite_detected"})

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "database_url_scheme": scheme,
            "db_connectivity_required": config.DB_CONNECTIVITY_REQUIRED,
        },
    )
    return report


def bootstrap() -> StartupReport:
    """Configure logging, then validate the runtime environment."""
    configure_logging()
    return validate_startup_config()
