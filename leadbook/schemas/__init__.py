"""Pydantic schema package for API contracts."""

from leadbook.schemas.auth import LoginRequest, RefreshRequest, RegisterRequest, TokenResponse, UserResponse
from leadbook.schemas.catalog import CatalogItemResponse, QuoteRequest, QuoteResponse
from leadbook.schemas.common import APIEnvelope, ErrorEnvelope
from leadbook.schemas.leads import (
    LeadCreateRequest,
    LeadDetailResponse,
    LeadFields,
    LeadResponse,
    LeadStatsResponse,
    LeadStatusUpdateRequest,
)

__all__ = [
    "APIEnvelope",
    "CatalogItemResponse",
    "ErrorEnvelope",
    "LeadCreateRequest",
    "LeadDetailResponse",
    "LeadFields",
    "LeadResponse",
    "LeadStatsResponse",
    "LeadStatusUpdateRequest",
    "LoginRequest",
    "QuoteRequest",
    "QuoteResponse",
    "RefreshRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
]
