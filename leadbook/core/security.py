"""Security primitives for password workflows."""

from __future__ import annotations

import hashlib
import hmac
import secrets

PBKDF2_ITERATIONS = 240_000


def hash_password(password: str, pepper: str = "", salt: str | None = None) -> str:
    """Return a salted PBKDF2-SHA256 hash encoded as ``salt$hexdigest``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        f"{pepper}:{password}".encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
    )
    return f"{salt}${digest.hex()}"


def verify_password(password: str, hashed_password: str, pepper: str = "") -> bool:
    """Constant-time comparison for hashed password values."""
    salt, sep, _ = hashed_password.partition("$")
    if not sep:
        return False
    candidate = hash_password(password=password, pepper=pepper, salt=salt)
    return hmac.compare_digest(candidate, hashed_password)
