"""Default catalog rows inserted on first start."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from leadbook.models import Product, Service

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS: tuple[tuple[str, str, Decimal], ...] = (
    ("Aerobin - Large", "Large capacity aerobic composting bin", Decimal("3500.00")),
    ("Aerobin - Small", "Compact aerobic composting bin", Decimal("2000.00")),
    ("Compost Bin - Large", "Indoor compost bin for organic waste management", Decimal("2500.00")),
    ("Compost Bin - Small", "Indoor compost bin for organic waste management", Decimal("1200.00")),
    ("Dual Shaft 1 HP Shredder", "High-capacity waste shredder", Decimal("10000.00")),
    ("Dual Shaft 3 HP Shredder", "Industrial-grade waste shredder", Decimal("20000.00")),
    ("Organic Soil Mix", "Premium organic soil mixture", Decimal("500.00")),
    ("Planter Box - Medium", "Medium-sized planter box for urban gardening", Decimal("800.00")),
)

DEFAULT_SERVICES: tuple[tuple[str, str, Decimal], ...] = (
    ("Waste Management Consultation", "Expert consultation for waste management solutions", Decimal("5000.00")),
    ("Installation Service", "Professional installation of waste management equipment", Decimal("2000.00")),
    ("Maintenance Package", "Monthly maintenance and support service", Decimal("1500.00")),
    ("Training Program", "Comprehensive training on waste management best practices", Decimal("3000.00")),
)


def _insert_missing(session: Session, model: type[Product] | type[Service], rows) -> int:
    existing = {name for (name,) in session.query(model.name).all()}
    inserted = 0
    for name, description, price in rows:
        if name in existing:
            continue
        session.add(model(name=name, description=description, price=price))
        inserted += 1
    return inserted


def seed_catalog(session: Session) -> int:
    """Insert default products and services that are not present by name."""
    inserted = _insert_missing(session, Product, DEFAULT_PRODUCTS)
    inserted += _insert_missing(session, Service, DEFAULT_SERVICES)
    session.commit()
    logger.info("catalog.seeded", extra={"event": "catalog.seeded", "inserted": inserted})
    return inserted
