"""Read-only access to the active product and service catalog."""

from __future__ import annotations

import logging
from decimal import Decimal

from leadbook.core.exceptions import RepositoryUnavailable
from leadbook.models import CatalogKind, Product, Service
from leadbook.services.amount_calculator import CatalogSnapshot
from leadbook.services.base_service import BaseService

logger = logging.getLogger(__name__)

CATALOG_MODELS: dict[CatalogKind, type[Product] | type[Service]] = {
    CatalogKind.PRODUCT: Product,
    CatalogKind.SERVICE: Service,
}


class CatalogRepository(BaseService):
    """Active catalog items, sorted by name."""

    def list_active(self, kind: CatalogKind | str) -> list[Product] | list[Service]:
        kind = CatalogKind(kind)
        model = CATALOG_MODELS[kind]
        with self.storage_errors("catalog.list_active.failed", RepositoryUnavailable, kind=kind.value):
            items = (
                self.db.query(model)
                .filter(model.is_active.is_(True))
                .order_by(model.name.asc(), model.id.asc())
                .all()
            )
        logger.debug(
            "catalog.list_active",
            extra={"event": "catalog.list_active", "kind": kind.value, "count": len(items)},
        )
        return items

    def snapshot(self) -> CatalogSnapshot:
        """Capture id -> price for every active product and service."""
        products = self.list_active(CatalogKind.PRODUCT)
        services = self.list_active(CatalogKind.SERVICE)
        return CatalogSnapshot(
            product_prices={item.id: Decimal(item.price) for item in products},
            service_prices={item.id: Decimal(item.price) for item in services},
        )
