from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from leadbook.core.exceptions import RepositoryUnavailable
from leadbook.models import CatalogKind
from leadbook.repositories.catalog_repository import CatalogRepository


def test_list_active_products_sorted_by_name(session, catalog):
    names = [item.name for item in CatalogRepository(db=session).list_active(CatalogKind.PRODUCT)]

    assert names == ["Aerobin - Large", "Compost Bin - Large", "Compost Bin - Small"]


def test_list_active_accepts_plain_kind(session, catalog):
    names = [item.name for item in CatalogRepository(db=session).list_active("service")]

    assert names == ["Free Survey", "Installation Service", "Training Program"]


def test_list_active_on_empty_catalog(session):
    assert CatalogRepository(db=session).list_active(CatalogKind.PRODUCT) == []


def test_snapshot_excludes_inactive_items(session, catalog):
    snapshot = CatalogRepository(db=session).snapshot()

    assert snapshot.product_prices[catalog["Compost Bin - Large"]] == Decimal("2500.00")
    assert catalog["Retired Shredder"] not in snapshot.product_prices
    assert snapshot.service_prices[catalog["Free Survey"]] == Decimal("0.00")


def test_storage_failure_raises_repository_unavailable(session, monkeypatch):
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT products", {}, Exception("database is locked"))

    monkeypatch.setattr(session, "query", broken_query)

    with pytest.raises(RepositoryUnavailable):
        CatalogRepository(db=session).list_active(CatalogKind.PRODUCT)
