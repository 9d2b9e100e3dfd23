"""Auth endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from leadbook.api.v1._authz import raise_http_error
from leadbook.auth.jwt import REFRESH_TOKEN, create_token_pair, decode_jwt
from leadbook.core.config import Config
from leadbook.core.dependencies import get_auth_service, get_settings
from leadbook.core.exceptions import AuthenticationError, LeadbookException
from leadbook.models import User
from leadbook.schemas.auth import LoginRequest, RefreshRequest, RegisterRequest, TokenResponse, UserResponse
from leadbook.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_tokens(user: User, cfg: Config) -> TokenResponse:
    tokens = create_token_pair(
        user_id=user.id,
        email=user.email,
        secret=cfg.JWT_SECRET,
        access_ttl_minutes=cfg.JWT_ACCESS_TTL_MINUTES,
        refresh_ttl_days=cfg.JWT_REFRESH_TTL_DAYS,
    )
    return TokenResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, auth: AuthService = Depends(get_auth_service)) -> UserResponse:
    try:
        user = auth.register(payload.email, payload.password, payload.full_name)
    except LeadbookException as exc:
        raise_http_error(exc)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
    cfg: Config = Depends(get_settings),
) -> TokenResponse:
    try:
        user = auth.authenticate(payload.email, payload.password)
    except LeadbookException as exc:
        raise_http_error(exc)
    return _issue_tokens(user, cfg)


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    payload: RefreshRequest,
    auth: AuthService = Depends(get_auth_service),
    cfg: Config = Depends(get_settings),
) -> TokenResponse:
    try:
        claims = decode_jwt(payload.refresh_token, secret=cfg.JWT_SECRET, expected_use=REFRESH_TOKEN)
        user = auth.get_active_user(str(claims.get("sub", "")))
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    except LeadbookException as exc:
        raise_http_error(exc)
    return _issue_tokens(user, cfg)
