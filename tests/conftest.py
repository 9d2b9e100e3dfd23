from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from leadbook.auth.jwt import create_token_pair
from leadbook.auth.user_context import UserContext
from leadbook.core.config import get_config
from leadbook.core.dependencies import get_db_session
from leadbook.main import create_app
from leadbook.models import Base, Product, Service, User


def build_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session_factory():
    return build_session_factory()


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def add_user(session, email: str) -> UserContext:
    user = User(email=email, full_name=email.split("@")[0], hashed_password="not-a-real-hash")
    session.add(user)
    session.commit()
    return UserContext(user_id=user.id, email=user.email)


@pytest.fixture
def alice(session) -> UserContext:
    return add_user(session, "alice@example.com")


@pytest.fixture
def bob(session) -> UserContext:
    return add_user(session, "bob@example.com")


@pytest.fixture
def catalog(session) -> dict[str, str]:
    """Seed a small catalog and return name -> id."""
    rows = [
        Product(name="Compost Bin - Large", price=Decimal("2500.00")),
        Product(name="Compost Bin - Small", price=Decimal("1200.00")),
        Product(name="Aerobin - Large", price=Decimal("3500.00")),
        Product(name="Retired Shredder", price=Decimal("9000.00"), is_active=False),
        Service(name="Installation Service", price=Decimal("2000.00")),
        Service(name="Training Program", price=Decimal("3000.00")),
        Service(name="Free Survey", price=Decimal("0.00")),
    ]
    session.add_all(rows)
    session.commit()
    return {row.name: row.id for row in rows}


def _lead_fields(**overrides) -> dict:
    fields = {
        "full_name": "Priya Raman",
        "email": "priya@example.com",
        "address": "12 Lake Road, Pune",
        "company": "Green Homes",
        "lead_type": "Individual",
        "model_type": "Purchase",
        "lead_score": 50,
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def lead_fields():
    """Factory for a valid lead payload with per-test overrides."""
    return _lead_fields


@pytest.fixture
def client(session_factory):
    """API client whose requests share the test database."""
    app = create_app()

    def override_db_session():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_session] = override_db_session
    return TestClient(app)


def bearer(context: UserContext) -> dict[str, str]:
    tokens = create_token_pair(context.user_id, secret=get_config().JWT_SECRET, email=context.email)
    return {"Authorization": f"Bearer {tokens.access_token}"}


@pytest.fixture
def alice_headers(alice) -> dict[str, str]:
    return bearer(alice)


@pytest.fixture
def bob_headers(bob) -> dict[str, str]:
    return bearer(bob)
