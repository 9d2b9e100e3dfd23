"""Catalog request/response schemas."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CatalogItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    price: Decimal


class QuoteRequest(BaseModel):
    product_ids: list[str] = Field(default_factory=list)
    service_ids: list[str] = Field(default_factory=list)


class QuoteResponse(BaseModel):
    product_total: Decimal
    service_total: Decimal
    total: Decimal
    unresolved_ids: list[str] = Field(default_factory=list)
