from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from leadbook.models import Base, Lead, LeadProductLink, LeadStatus


def test_metadata_declares_all_tables():
    assert set(Base.metadata.tables) == {
        "users",
        "products",
        "services",
        "leads",
        "lead_products",
        "lead_services",
    }


def test_lead_columns(session):
    columns = {column["name"] for column in inspect(session.get_bind()).get_columns("leads")}

    assert {
        "id",
        "user_id",
        "full_name",
        "email",
        "address",
        "lead_type",
        "model_type",
        "lead_score",
        "status",
        "potential_amount",
        "follow_up",
        "follow_up_date",
        "follow_up_notes",
        "lead_sealed",
        "created_at",
        "updated_at",
    } <= columns


def test_enums_are_stored_by_value(session, alice):
    session.add(
        Lead(
            user_id=alice.user_id,
            full_name="Stored Value",
            email="v@example.com",
            address="Somewhere",
            status=LeadStatus.IN_PROGRESS,
        )
    )
    session.commit()

    row = session.execute(text("SELECT status, lead_type, model_type FROM leads")).one()

    assert tuple(row) == ("In-Progress", "Individual", "Purchase")


def test_lead_defaults(session, alice):
    lead = Lead(user_id=alice.user_id, full_name="Defaults", email="d@example.com", address="Somewhere")
    session.add(lead)
    session.commit()
    session.refresh(lead)

    assert lead.status == LeadStatus.NEW
    assert lead.lead_score == 0
    assert lead.potential_amount == Decimal("0")
    assert lead.lead_sealed is False
    assert lead.follow_up is False
    assert lead.created_at is not None


def test_score_check_constraint(session, alice):
    session.add(Lead(user_id=alice.user_id, full_name="Bad", email="b@example.com", address="X", lead_score=150))

    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_duplicate_link_is_rejected(session, alice, catalog):
    lead = Lead(user_id=alice.user_id, full_name="Linked", email="l@example.com", address="X")
    session.add(lead)
    session.flush()
    product_id = catalog["Compost Bin - Large"]
    session.add_all(
        [
            LeadProductLink(lead_id=lead.id, product_id=product_id),
            LeadProductLink(lead_id=lead.id, product_id=product_id),
        ]
    )

    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()
