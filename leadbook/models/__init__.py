"""SQLAlchemy model package for the lead schema."""

from leadbook.models.association import LeadProductLink, LeadServiceLink
from leadbook.models.base import Base
from leadbook.models.catalog import Product, Service
from leadbook.models.enums import CatalogKind, LeadStatus, LeadType, ModelType
from leadbook.models.lead import Lead
from leadbook.models.user import User

__all__ = [
    "Base",
    "CatalogKind",
    "Lead",
    "LeadProductLink",
    "LeadServiceLink",
    "LeadStatus",
    "LeadType",
    "ModelType",
    "Product",
    "Service",
    "User",
]
