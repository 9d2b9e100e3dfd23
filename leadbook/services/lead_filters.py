"""In-memory refinement of an already fetched lead list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from leadbook.models import Lead
from leadbook.models.enums import LeadStatus, LeadType, ModelType


@dataclass(frozen=True)
class LeadFilters:
    """Conjunctive filters; unset fields match everything."""

    search: str = ""
    status: LeadStatus | None = None
    lead_type: LeadType | None = None
    model_type: ModelType | None = None


@dataclass(frozen=True)
class LeadStats:
    total: int
    new: int
    in_progress: int
    closed: int
    potential_amount_total: Decimal


def matches_search(lead: Lead, term: str) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    haystacks = (lead.full_name, lead.email, lead.company)
    return any(value and needle in value.lower() for value in haystacks)


def matches(lead: Lead, filters: LeadFilters) -> bool:
    if not matches_search(lead, filters.search):
        return False
    if filters.status is not None and lead.status != filters.status:
        return False
    if filters.lead_type is not None and lead.lead_type != filters.lead_type:
        return False
    if filters.model_type is not None and lead.model_type != filters.model_type:
        return False
    return True


def filter_leads(leads: Iterable[Lead], filters: LeadFilters | None = None) -> list[Lead]:
    """Keep leads matching every filter, preserving input order."""
    if filters is None:
        return list(leads)
    return [lead for lead in leads if matches(lead, filters)]


def summarize_leads(leads: Iterable[Lead]) -> LeadStats:
    items = list(leads)
    return LeadStats(
        total=len(items),
        new=sum(1 for lead in items if lead.status == LeadStatus.NEW),
        in_progress=sum(1 for lead in items if lead.status == LeadStatus.IN_PROGRESS),
        closed=sum(1 for lead in items if lead.status == LeadStatus.CLOSED),
        potential_amount_total=sum((Decimal(lead.potential_amount or 0) for lead in items), Decimal("0.00")),
    )
