"""Health endpoints for API v1."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leadbook.core.config import Config
from leadbook.core.dependencies import get_db_session, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db_session), cfg: Config = Depends(get_settings)) -> dict:
    """Liveness plus a database round trip; never fails the request."""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        logger.warning("health.database.unavailable", extra={"event": "health.database.unavailable"})
        database = "unavailable"
    return {
        "status": "ok" if database == "ok" else "degraded",
        "service": cfg.APP_NAME,
        "version": cfg.APP_VERSION,
        "database": database,
    }
