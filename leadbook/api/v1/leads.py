"""Lead endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from leadbook.api.v1._authz import current_user, raise_http_error
from leadbook.auth.user_context import UserContext
from leadbook.core.dependencies import get_lead_service
from leadbook.core.exceptions import LeadbookException
from leadbook.models import LeadType, ModelType
from leadbook.schemas.common import APIEnvelope
from leadbook.schemas.leads import (
    LeadCreateRequest,
    LeadDetailResponse,
    LeadFields,
    LeadResponse,
    LeadStatsResponse,
    LeadStatusUpdateRequest,
)
from leadbook.services.lead_filters import LeadFilters
from leadbook.services.lead_service import LeadService, parse_status

router = APIRouter(prefix="/leads", tags=["leads"])


@router.get("")
def list_leads(
    search: str = Query(default="", max_length=255),
    lead_status: str | None = Query(default=None, alias="status", max_length=40),
    lead_type: LeadType | None = Query(default=None),
    model_type: ModelType | None = Query(default=None),
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> dict:
    try:
        status_filter = parse_status(lead_status) if lead_status else None
        filters = LeadFilters(search=search, status=status_filter, lead_type=lead_type, model_type=model_type)
        leads = service.list_leads(user, filters)
    except LeadbookException as exc:
        raise_http_error(exc)
    return {
        "items": [LeadResponse.model_validate(lead).model_dump(mode="json") for lead in leads],
        "total": len(leads),
    }


# Declared before /{lead_id} so "stats" is not captured as an id.
@router.get("/stats", response_model=LeadStatsResponse)
def lead_stats(
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> LeadStatsResponse:
    try:
        stats = service.lead_stats(user)
    except LeadbookException as exc:
        raise_http_error(exc)
    return LeadStatsResponse(
        total=stats.total,
        new=stats.new,
        in_progress=stats.in_progress,
        closed=stats.closed,
        potential_amount_total=stats.potential_amount_total,
    )


@router.post("", response_model=LeadDetailResponse, status_code=status.HTTP_201_CREATED)
def create_lead(
    payload: LeadCreateRequest,
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> LeadDetailResponse:
    try:
        lead = service.create_lead(
            user,
            payload.model_dump(exclude={"product_ids", "service_ids"}),
            product_ids=payload.product_ids,
            service_ids=payload.service_ids,
        )
    except LeadbookException as exc:
        raise_http_error(exc)
    return LeadDetailResponse.model_validate(lead)


@router.get("/{lead_id}", response_model=LeadDetailResponse)
def get_lead(
    lead_id: str,
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> LeadDetailResponse:
    try:
        lead = service.get_lead(user, lead_id)
    except LeadbookException as exc:
        raise_http_error(exc)
    return LeadDetailResponse.model_validate(lead)


@router.put("/{lead_id}", response_model=LeadDetailResponse)
def update_lead(
    lead_id: str,
    payload: LeadFields,
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> LeadDetailResponse:
    try:
        lead = service.update_lead(user, lead_id, payload)
    except LeadbookException as exc:
        raise_http_error(exc)
    return LeadDetailResponse.model_validate(lead)


@router.patch("/{lead_id}/status", response_model=LeadResponse)
def update_lead_status(
    lead_id: str,
    payload: LeadStatusUpdateRequest,
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> LeadResponse:
    try:
        lead = service.update_status(user, lead_id, payload.status)
    except LeadbookException as exc:
        raise_http_error(exc)
    return LeadResponse.model_validate(lead)


@router.delete("/{lead_id}", response_model=APIEnvelope)
def delete_lead(
    lead_id: str,
    user: UserContext = Depends(current_user),
    service: LeadService = Depends(get_lead_service),
) -> APIEnvelope:
    try:
        service.delete_lead(user, lead_id)
    except LeadbookException as exc:
        raise_http_error(exc)
    return APIEnvelope(message=f"Lead deleted: {lead_id}")
