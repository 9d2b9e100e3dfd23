"""Canonical enum values for the lead schema."""

from __future__ import annotations

import enum


class LeadType(str, enum.Enum):
    INDIVIDUAL = "Individual"
    BUSINESS = "Business"
    HOUSING_SOCIETY = "Housing-Society"
    AGENT = "Agent"


class ModelType(str, enum.Enum):
    PURCHASE = "Purchase"
    RENT = "Rent"
    INDIVIDUAL_HOME_KIT = "Individual Home-kit"


class LeadStatus(str, enum.Enum):
    """Flat lead status set. Any value may follow any other."""

    NEW = "New"
    IN_PROGRESS = "In-Progress"
    CLOSED = "Closed"

    @classmethod
    def parse(cls, value: "str | LeadStatus") -> "LeadStatus":
        """Resolve a status value, accepting retired six-state labels."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        text = LEGACY_STATUS_MAP.get(text, text)
        return cls(text)


# Retired labels from the six-state status set.
LEGACY_STATUS_MAP: dict[str, str] = {
    "Contacted": LeadStatus.IN_PROGRESS.value,
    "Qualified": LeadStatus.IN_PROGRESS.value,
    "Proposal": LeadStatus.IN_PROGRESS.value,
    "Lost": LeadStatus.CLOSED.value,
}


class CatalogKind(str, enum.Enum):
    PRODUCT = "product"
    SERVICE = "service"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values (``"In-Progress"``) rather than member names."""
    return [member.value for member in enum_cls]
