"""Owner-scoped persistence for lead rows."""

from __future__ import annotations

from leadbook.models import Lead
from leadbook.services.base_service import BaseService


class LeadRepository(BaseService):
    """Every query filters on ``user_id``; callers never see foreign rows.

    Methods flush but never commit, so the caller owns the transaction.
    """

    def add(self, lead: Lead) -> Lead:
        self.db.add(lead)
        self.db.flush()
        return lead

    def get_owned(self, lead_id: str, user_id: str) -> Lead | None:
        return (
            self.db.query(Lead)
            .filter(Lead.id == lead_id, Lead.user_id == user_id)
            .first()
        )

    def list_owned(self, user_id: str) -> list[Lead]:
        return (
            self.db.query(Lead)
            .filter(Lead.user_id == user_id)
            .order_by(Lead.lead_score.desc(), Lead.created_at.desc(), Lead.id.asc())
            .all()
        )

    def delete(self, lead: Lead) -> None:
        self.db.delete(lead)
        self.db.flush()
