"""Deterministic validators and sanitizers for user-entered text."""

from __future__ import annotations


def sanitize_text(value: str | None, max_len: int | None = None) -> str:
    """Strip NUL bytes and surrounding whitespace; truncate only when ``max_len`` is given."""
    if value is None:
        return ""
    cleaned = str(value).replace("\x00", "").strip()
    if max_len is not None:
        cleaned = cleaned[:max_len]
    return cleaned


def optional_text(value: str | None, max_len: int | None = None) -> str | None:
    """Sanitize optional text, collapsing blank input to ``None``."""
    cleaned = sanitize_text(value, max_len=max_len)
    return cleaned or None
