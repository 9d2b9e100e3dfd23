from __future__ import annotations

from decimal import Decimal

from leadbook.database.seed import DEFAULT_PRODUCTS, DEFAULT_SERVICES, seed_catalog
from leadbook.models import Product, Service


def test_seed_inserts_default_catalog(session):
    inserted = seed_catalog(session)

    assert inserted == len(DEFAULT_PRODUCTS) + len(DEFAULT_SERVICES)
    assert session.query(Product).count() == len(DEFAULT_PRODUCTS)
    assert session.query(Service).count() == len(DEFAULT_SERVICES)
    bin_large = session.query(Product).filter(Product.name == "Compost Bin - Large").one()
    assert bin_large.price == Decimal("2500.00")
    assert bin_large.is_active is True


def test_seed_is_idempotent(session):
    seed_catalog(session)

    assert seed_catalog(session) == 0
    assert session.query(Product).count() == len(DEFAULT_PRODUCTS)


def test_seed_only_fills_missing_names(session):
    session.add(Service(name="Training Program", price=Decimal("2750.00")))
    session.commit()

    inserted = seed_catalog(session)

    assert inserted == len(DEFAULT_PRODUCTS) + len(DEFAULT_SERVICES) - 1
    training = session.query(Service).filter(Service.name == "Training Program").one()
    assert training.price == Decimal("2750.00")
