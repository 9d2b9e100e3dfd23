"""Local user accounts backing the bearer-token identity."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from leadbook.core.config import get_config
from leadbook.core.exceptions import AuthenticationError, ValidationError
from leadbook.core.security import hash_password, verify_password
from leadbook.models import User
from leadbook.services.base_service import BaseService

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService(BaseService):
    def __init__(self, db: Session | None = None, pepper: str | None = None) -> None:
        super().__init__(db)
        self.pepper = get_config().PASSWORD_PEPPER if pepper is None else pepper

    def register(self, email: str, password: str, full_name: str | None = None) -> User:
        address = normalize_email(email)
        if "@" not in address:
            raise ValidationError({"email": "must be an email address"})
        if len(password) < 8:
            raise ValidationError({"password": "must be at least 8 characters"})

        with self.storage_errors("auth.register.lookup_failed"):
            existing = self.db.query(User).filter(User.email == address).first()
        if existing is not None:
            raise ValidationError({"email": "is already registered"})

        user = User(
            email=address,
            full_name=(full_name or "").strip() or None,
            hashed_password=hash_password(password, pepper=self.pepper),
        )
        with self.storage_errors("auth.register.failed"):
            try:
                self.db.add(user)
                self.commit()
            except IntegrityError as exc:
                raise ValidationError({"email": "is already registered"}) from exc
            self.db.refresh(user)

        logger.info("auth.user.registered", extra={"event": "auth.user.registered", "user_id": user.id})
        return user

    def authenticate(self, email: str, password: str) -> User:
        with self.storage_errors("auth.authenticate.lookup_failed"):
            user = self.db.query(User).filter(User.email == normalize_email(email)).first()
        if user is None or not user.is_active:
            raise AuthenticationError("Invalid credentials.")
        if not verify_password(password, user.hashed_password, pepper=self.pepper):
            raise AuthenticationError("Invalid credentials.")
        return user

    def get_active_user(self, user_id: str) -> User:
        with self.storage_errors("auth.user.lookup_failed", user_id=user_id):
            user = self.db.query(User).filter(User.id == user_id).first()
        if user is None or not user.is_active:
            raise AuthenticationError("User is not active.")
        return user
