"""Explicit user context passed into every lead operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from leadbook.core.exceptions import AuthenticationError


@dataclass(frozen=True)
class UserContext:
    user_id: str
    email: str | None = None


def from_claims(claims: dict[str, Any]) -> UserContext:
    """Build user context from access-token claims."""
    try:
        user_id = str(claims["sub"]).strip()
    except (KeyError, TypeError) as exc:
        raise AuthenticationError("Token claims are missing user context.") from exc
    if not user_id:
        raise AuthenticationError("Token claims are missing user context.")

    email = claims.get("email")
    return UserContext(user_id=user_id, email=str(email) if email else None)


def require_user(context: UserContext | None) -> UserContext:
    """Reject calls made without a signed-in user."""
    if context is None or not context.user_id:
        raise AuthenticationError("A signed-in user is required.")
    return context
