"""Catalog endpoints for API v1."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from leadbook.api.v1._authz import current_user, raise_http_error
from leadbook.core.dependencies import get_catalog_repository
from leadbook.core.exceptions import LeadbookException, RepositoryUnavailable
from leadbook.models import CatalogKind
from leadbook.repositories.catalog_repository import CatalogRepository
from leadbook.schemas.catalog import CatalogItemResponse, QuoteRequest, QuoteResponse
from leadbook.services.amount_calculator import breakdown_amount

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _list_items(catalog: CatalogRepository, kind: CatalogKind) -> dict:
    try:
        items = catalog.list_active(kind)
    except RepositoryUnavailable:
        # Empty picker; leads can still be saved without items.
        logger.warning("catalog.unavailable", extra={"event": "catalog.unavailable", "kind": kind.value})
        items = []
    return {"items": [CatalogItemResponse.model_validate(item).model_dump(mode="json") for item in items]}


@router.get("/products", dependencies=[Depends(current_user)])
def list_products(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> dict:
    return _list_items(catalog, CatalogKind.PRODUCT)


@router.get("/services", dependencies=[Depends(current_user)])
def list_services(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> dict:
    return _list_items(catalog, CatalogKind.SERVICE)


@router.post("/quote", response_model=QuoteResponse, dependencies=[Depends(current_user)])
def quote(
    payload: QuoteRequest,
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> QuoteResponse:
    """Preview the amount a new lead would get for this selection."""
    try:
        snapshot = catalog.snapshot()
    except LeadbookException as exc:
        raise_http_error(exc)

    breakdown = breakdown_amount(payload.product_ids, payload.service_ids, snapshot)
    return QuoteResponse(
        product_total=breakdown.product_total,
        service_total=breakdown.service_total,
        total=breakdown.total,
        unresolved_ids=list(breakdown.unresolved_ids),
    )
