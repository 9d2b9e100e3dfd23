"""Lead request/response schemas for API contracts."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from leadbook.models.enums import LeadStatus, LeadType, ModelType
from leadbook.utils.validators import optional_text, sanitize_text


class LeadFields(BaseModel):
    """Mutable lead fields with their defaults.

    Used both for creation and for full-record updates. Blank optional text is
    stored as ``None`` and the follow-up date/notes are dropped whenever the
    follow-up gate is off.
    """

    full_name: str = Field(max_length=255)
    email: str = Field(max_length=320)
    address: str
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=255)
    location_url: str | None = Field(default=None, max_length=2048)
    pincode: str | None = Field(default=None, max_length=20)
    notes: str | None = None
    lead_type: LeadType = LeadType.INDIVIDUAL
    model_type: ModelType = ModelType.PURCHASE
    lead_score: int = Field(default=0, ge=0, le=100)
    status: LeadStatus = LeadStatus.NEW
    potential_amount: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    follow_up: bool = False
    follow_up_date: date | None = None
    follow_up_notes: str | None = None
    lead_sealed: bool = False

    @field_validator("full_name", "email", "address", mode="before")
    @classmethod
    def required_text_is_not_blank(cls, value: object) -> str:
        cleaned = sanitize_text(value if value is None else str(value))
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned

    @field_validator("phone", "company", "location_url", "pincode", "notes", "follow_up_notes", mode="before")
    @classmethod
    def blank_text_is_none(cls, value: object) -> str | None:
        if value is None:
            return None
        return optional_text(str(value))

    @field_validator("status", mode="before")
    @classmethod
    def status_accepts_legacy_labels(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return LeadStatus.parse(value)
            except ValueError:
                return value
        return value

    @field_validator("follow_up_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def clear_follow_up_when_gate_off(self) -> "LeadFields":
        if not self.follow_up:
            self.follow_up_date = None
            self.follow_up_notes = None
        return self


class LeadCreateRequest(LeadFields):
    product_ids: list[str] = Field(default_factory=list)
    service_ids: list[str] = Field(default_factory=list)


class LeadStatusUpdateRequest(BaseModel):
    status: str = Field(min_length=2, max_length=40)


class LeadResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    full_name: str
    email: str
    phone: str | None = None
    company: str | None = None
    address: str
    location_url: str | None = None
    pincode: str | None = None
    notes: str | None = None
    lead_type: LeadType
    model_type: ModelType
    lead_score: int
    status: LeadStatus
    potential_amount: Decimal
    follow_up: bool
    follow_up_date: date | None = None
    follow_up_notes: str | None = None
    lead_sealed: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LeadDetailResponse(LeadResponse):
    product_ids: list[str] = Field(default_factory=list)
    service_ids: list[str] = Field(default_factory=list)


class LeadStatsResponse(BaseModel):
    total: int
    new: int
    in_progress: int
    closed: int
    potential_amount_total: Decimal
