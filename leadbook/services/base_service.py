"""Shared service base with robust session lifecycle behavior."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leadbook.core.exceptions import RepositoryError
from leadbook.database import db as db_module

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that operate on a SQLAlchemy session."""

    def __init__(self, db: Session | None = None) -> None:
        self.db = db or db_module.SessionLocal()

    def commit(self) -> None:
        """Commit current transaction and rollback on failure."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

    @contextmanager
    def storage_errors(
        self,
        event: str,
        error_cls: type[RepositoryError] = RepositoryError,
        **fields: Any,
    ) -> Iterator[None]:
        """Translate SQLAlchemy failures into ``error_cls`` after rolling back."""
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(event, extra={"event": event, **fields})
            raise error_cls(f"Storage operation failed: {event}") from exc

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.rollback()
        self.close()
