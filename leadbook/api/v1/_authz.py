"""Shared authorization and error-mapping helpers for API v1 route modules."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, NoReturn

from fastapi import Header, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from leadbook.auth.user_context import UserContext
from leadbook.core.config import get_config
from leadbook.core.dependencies import get_current_user
from leadbook.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from leadbook.schemas.common import ErrorEnvelope

logger = logging.getLogger(__name__)

HTTP_422 = 422
REQUEST_LOCATIONS = {"body", "query", "path", "header"}


def _extract_bearer_token(authorization: str | None) -> str:
    if authorization is None or not authorization.strip():
        raise AuthenticationError("Authorization header is required.")
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Authorization header must use Bearer token.")
    return parts[1].strip()


def authorize(authorization: str | None) -> UserContext:
    token = _extract_bearer_token(authorization)
    return get_current_user(token=token, settings=get_config())


def require_user(authorization: str | None) -> UserContext:
    """Resolve the caller or raise 401."""
    try:
        return authorize(authorization)
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc


def current_user(authorization: str | None = Header(default=None, alias="Authorization")) -> UserContext:
    """FastAPI dependency form of ``require_user``."""
    return require_user(authorization)


def map_service_error(exc: Exception) -> tuple[int, dict[str, Any]]:
    if isinstance(exc, AuthenticationError):
        envelope = ErrorEnvelope(error_code="unauthorized", detail=str(exc))
        return status.HTTP_401_UNAUTHORIZED, envelope.model_dump()
    if isinstance(exc, ValidationError):
        envelope = ErrorEnvelope(error_code="validation_error", detail="Validation failed.", errors=exc.errors)
        return HTTP_422, envelope.model_dump()
    if isinstance(exc, NotFoundError):
        envelope = ErrorEnvelope(error_code="not_found", detail=str(exc))
        return status.HTTP_404_NOT_FOUND, envelope.model_dump()
    if isinstance(exc, RepositoryError):
        envelope = ErrorEnvelope(error_code="storage_error", detail="Storage operation failed.")
        return status.HTTP_500_INTERNAL_SERVER_ERROR, envelope.model_dump()
    logger.exception("api.unexpected_error", extra={"event": "api.unexpected_error"})
    envelope = ErrorEnvelope(error_code="internal_error", detail="Unexpected error.")
    return status.HTTP_500_INTERNAL_SERVER_ERROR, envelope.model_dump()


def raise_http_error(exc: Exception) -> NoReturn:
    code, detail = map_service_error(exc)
    raise HTTPException(status_code=code, detail=detail) from exc


def request_field_errors(errors: Sequence[dict[str, Any]]) -> dict[str, str]:
    """Flatten FastAPI request errors into the field -> message map services use."""
    fields: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        fields.setdefault(".".join(loc) or "__all__", error.get("msg", "invalid value"))
    return fields


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    envelope = ErrorEnvelope(
        error_code="validation_error",
        detail="Validation failed.",
        errors=request_field_errors(exc.errors()),
    )
    return JSONResponse(status_code=HTTP_422, content={"detail": envelope.model_dump()})
