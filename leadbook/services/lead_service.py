"""Lead lifecycle: creation, edits, status changes, deletion and listing."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from leadbook.auth.user_context import UserContext, require_user
from leadbook.core.exceptions import NotFoundError, ValidationError
from leadbook.models import Lead, LeadStatus
from leadbook.models.base import utcnow
from leadbook.repositories.association_store import AssociationStore
from leadbook.repositories.catalog_repository import CatalogRepository
from leadbook.repositories.lead_repository import LeadRepository
from leadbook.schemas.leads import LeadFields
from leadbook.services.amount_calculator import calculate_amount, resolve_potential_amount, unique_ids
from leadbook.services.base_service import BaseService
from leadbook.services.lead_filters import LeadFilters, LeadStats, filter_leads, summarize_leads

logger = logging.getLogger(__name__)


def _field_errors(exc: PydanticValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "__all__"
        errors.setdefault(field, error.get("msg", "invalid value"))
    return errors


def validate_fields(fields: LeadFields | Mapping[str, Any]) -> LeadFields:
    """Validate caller input into a ``LeadFields`` record.

    Instances are re-validated too, so records built with ``model_construct``
    or mutated after construction cannot bypass the range checks.
    """
    payload = fields.model_dump() if isinstance(fields, LeadFields) else dict(fields)
    try:
        return LeadFields.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_field_errors(exc)) from exc


def parse_status(value: LeadStatus | str) -> LeadStatus:
    try:
        return LeadStatus.parse(value)
    except ValueError as exc:
        allowed = ", ".join(status.value for status in LeadStatus)
        raise ValidationError({"status": f"must be one of: {allowed}"}) from exc


class LeadService(BaseService):
    """Owner-scoped lead lifecycle.

    Every operation takes the caller's ``UserContext``. A lead owned by someone
    else is reported exactly like a missing one.
    """

    def __init__(self, db: Session | None = None) -> None:
        super().__init__(db)
        self.leads = LeadRepository(self.db)
        self.associations = AssociationStore(self.db)
        self.catalog = CatalogRepository(self.db)

    def create_lead(
        self,
        context: UserContext,
        fields: LeadFields | Mapping[str, Any],
        product_ids: Iterable[str] = (),
        service_ids: Iterable[str] = (),
    ) -> Lead:
        """Insert a lead and its catalog links in one transaction."""
        user = require_user(context)
        record = validate_fields(fields)
        selected_products = unique_ids(product_ids)
        selected_services = unique_ids(service_ids)

        linked_products: list[str] = []
        linked_services: list[str] = []
        amount = record.potential_amount
        if selected_products or selected_services:
            snapshot = self.catalog.snapshot()
            linked_products = snapshot.known_products(selected_products)
            linked_services = snapshot.known_services(selected_services)
            calculated = calculate_amount(linked_products, linked_services, snapshot)
            amount = resolve_potential_amount(calculated, record.potential_amount)

        lead = Lead(user_id=user.user_id, **record.model_dump())
        lead.potential_amount = amount

        with self.storage_errors("lead.create_failed", user_id=user.user_id):
            self.leads.add(lead)
            self.associations.attach(lead, linked_products, linked_services)
            self.commit()
            self.db.refresh(lead)

        logger.info(
            "lead.created",
            extra={
                "event": "lead.created",
                "user_id": user.user_id,
                "lead_id": lead.id,
                "count": len(linked_products) + len(linked_services),
            },
        )
        return lead

    def get_lead(self, context: UserContext, lead_id: str) -> Lead:
        user = require_user(context)
        with self.storage_errors("lead.fetch_failed", user_id=user.user_id, lead_id=lead_id):
            lead = self.leads.get_owned(lead_id, user.user_id)
        if lead is None:
            raise NotFoundError(f"Lead not found: {lead_id}")
        return lead

    def update_lead(
        self,
        context: UserContext,
        lead_id: str,
        fields: LeadFields | Mapping[str, Any],
    ) -> Lead:
        """Replace every mutable field of an owned lead.

        The stored amount is taken as given and catalog links are left alone.
        """
        user = require_user(context)
        record = validate_fields(fields)
        lead = self.get_lead(user, lead_id)

        with self.storage_errors("lead.update_failed", user_id=user.user_id, lead_id=lead_id):
            for name, value in record.model_dump().items():
                setattr(lead, name, value)
            lead.updated_at = utcnow()
            self.commit()
            self.db.refresh(lead)

        logger.info(
            "lead.updated",
            extra={"event": "lead.updated", "user_id": user.user_id, "lead_id": lead.id},
        )
        return lead

    def update_status(self, context: UserContext, lead_id: str, status: LeadStatus | str) -> Lead:
        user = require_user(context)
        new_status = parse_status(status)
        lead = self.get_lead(user, lead_id)

        with self.storage_errors("lead.status.update_failed", user_id=user.user_id, lead_id=lead_id):
            lead.status = new_status
            lead.updated_at = utcnow()
            self.commit()
            self.db.refresh(lead)

        logger.info(
            "lead.status.updated",
            extra={
                "event": "lead.status.updated",
                "user_id": user.user_id,
                "lead_id": lead.id,
                "status": new_status.value,
            },
        )
        return lead

    def delete_lead(self, context: UserContext, lead_id: str) -> None:
        user = require_user(context)
        lead = self.get_lead(user, lead_id)

        with self.storage_errors("lead.delete_failed", user_id=user.user_id, lead_id=lead_id):
            self.leads.delete(lead)
            self.commit()

        logger.info(
            "lead.deleted",
            extra={"event": "lead.deleted", "user_id": user.user_id, "lead_id": lead_id},
        )

    def list_leads(self, context: UserContext, filters: LeadFilters | None = None) -> list[Lead]:
        """Fetch the caller's leads by score, then refine them in memory."""
        user = require_user(context)
        with self.storage_errors("lead.list_failed", user_id=user.user_id):
            leads = self.leads.list_owned(user.user_id)
        return filter_leads(leads, filters)

    def lead_stats(self, context: UserContext) -> LeadStats:
        return summarize_leads(self.list_leads(context))
