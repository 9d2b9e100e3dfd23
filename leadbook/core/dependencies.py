"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from leadbook.auth.jwt import ACCESS_TOKEN, decode_jwt
from leadbook.auth.user_context import UserContext, from_claims
from leadbook.core.config import Config, get_config
from leadbook.database.db import get_db
from leadbook.repositories.catalog_repository import CatalogRepository
from leadbook.services.auth_service import AuthService
from leadbook.services.lead_service import LeadService


def get_settings() -> Config:
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """One session per request."""
    yield from get_db()


def get_lead_service(db: Session = Depends(get_db_session)) -> LeadService:
    return LeadService(db=db)


def get_catalog_repository(db: Session = Depends(get_db_session)) -> CatalogRepository:
    return CatalogRepository(db=db)


def get_auth_service(db: Session = Depends(get_db_session)) -> AuthService:
    return AuthService(db=db)


def get_current_user(token: str, settings: Config | None = None) -> UserContext:
    """Resolve the signed-in user from an access token; refresh tokens are refused."""
    cfg = settings or get_settings()
    claims = decode_jwt(token=token, secret=cfg.JWT_SECRET, expected_use=ACCESS_TOKEN)
    return from_claims(claims)
