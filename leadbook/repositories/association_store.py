"""Lead to product/service links written at lead creation."""

from __future__ import annotations

from collections.abc import Iterable

from leadbook.models import Lead, LeadProductLink, LeadServiceLink
from leadbook.services.base_service import BaseService


class AssociationStore(BaseService):
    def attach(
        self,
        lead: Lead,
        product_ids: Iterable[str],
        service_ids: Iterable[str],
        quantity: int = 1,
    ) -> tuple[list[LeadProductLink], list[LeadServiceLink]]:
        """Insert one link per id; the caller passes already-resolved ids."""
        product_links = [
            LeadProductLink(lead_id=lead.id, product_id=product_id, quantity=quantity)
            for product_id in product_ids
        ]
        service_links = [
            LeadServiceLink(lead_id=lead.id, service_id=service_id, quantity=quantity)
            for service_id in service_ids
        ]
        lead.product_links.extend(product_links)
        lead.service_links.extend(service_links)
        self.db.flush()
        return product_links, service_links
