"""Lead to catalog item association models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadbook.models.base import Base, UUIDPrimaryKeyMixin, utcnow


class LeadProductLink(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "lead_products"
    __table_args__ = (UniqueConstraint("lead_id", "product_id", name="uq_lead_products_lead_product"),)

    lead_id: Mapped[str] = mapped_column(String(36), ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id: Mapped[str] = mapped_column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    lead = relationship("Lead", back_populates="product_links")


class LeadServiceLink(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "lead_services"
    __table_args__ = (UniqueConstraint("lead_id", "service_id", name="uq_lead_services_lead_service"),)

    lead_id: Mapped[str] = mapped_column(String(36), ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id: Mapped[str] = mapped_column(String(36), ForeignKey("services.id", ondelete="CASCADE"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    lead = relationship("Lead", back_populates="service_links")
