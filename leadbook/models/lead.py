"""Lead model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, Date, Enum, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadbook.models.base import AuditMixin, Base, OwnedMixin, UUIDPrimaryKeyMixin
from leadbook.models.enums import LeadStatus, LeadType, ModelType, enum_values


class Lead(Base, UUIDPrimaryKeyMixin, AuditMixin, OwnedMixin):
    __tablename__ = "leads"
    __table_args__ = (
        CheckConstraint("lead_score >= 0 AND lead_score <= 100", name="ck_leads_lead_score_range"),
        CheckConstraint("potential_amount >= 0", name="ck_leads_potential_amount_non_negative"),
        Index("idx_leads_user_score", "user_id", "lead_score"),
        Index("idx_leads_user_status", "user_id", "status"),
    )

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50))
    company: Mapped[str | None] = mapped_column(String(255))
    address: Mapped[str] = mapped_column(Text, nullable=False)
    location_url: Mapped[str | None] = mapped_column(String(2048))
    pincode: Mapped[str | None] = mapped_column(String(20))
    notes: Mapped[str | None] = mapped_column(Text)

    lead_type: Mapped[LeadType] = mapped_column(
        Enum(LeadType, name="lead_type", values_callable=enum_values),
        default=LeadType.INDIVIDUAL,
        nullable=False,
    )
    model_type: Mapped[ModelType] = mapped_column(
        Enum(ModelType, name="model_type", values_callable=enum_values),
        default=ModelType.PURCHASE,
        nullable=False,
    )
    lead_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[LeadStatus] = mapped_column(
        Enum(LeadStatus, name="lead_status", values_callable=enum_values),
        default=LeadStatus.NEW,
        nullable=False,
    )
    potential_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)

    follow_up: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    follow_up_date: Mapped[date | None] = mapped_column(Date)
    follow_up_notes: Mapped[str | None] = mapped_column(Text)
    lead_sealed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    product_links = relationship(
        "LeadProductLink", back_populates="lead", cascade="all, delete-orphan", lazy="selectin"
    )
    service_links = relationship(
        "LeadServiceLink", back_populates="lead", cascade="all, delete-orphan", lazy="selectin"
    )

    @property
    def product_ids(self) -> list[str]:
        return [link.product_id for link in self.product_links]

    @property
    def service_ids(self) -> list[str]:
        return [link.service_id for link in self.service_links]
