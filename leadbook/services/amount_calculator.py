"""Potential-amount derivation from selected catalog items."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


@dataclass(frozen=True)
class CatalogSnapshot:
    """Prices of the active catalog items at one point in time."""

    product_prices: Mapping[str, Decimal] = field(default_factory=dict)
    service_prices: Mapping[str, Decimal] = field(default_factory=dict)

    def known_products(self, product_ids: Iterable[str]) -> list[str]:
        return [item_id for item_id in unique_ids(product_ids) if item_id in self.product_prices]

    def known_services(self, service_ids: Iterable[str]) -> list[str]:
        return [item_id for item_id in unique_ids(service_ids) if item_id in self.service_prices]


@dataclass(frozen=True)
class AmountBreakdown:
    product_total: Decimal
    service_total: Decimal
    unresolved_ids: tuple[str, ...] = ()

    @property
    def total(self) -> Decimal:
        return (self.product_total + self.service_total).quantize(CENTS)


def unique_ids(ids: Iterable[str]) -> list[str]:
    """Deduplicate a selection while keeping first-seen order."""
    seen: set[str] = set()
    ordered: list[str] = []
    for item_id in ids:
        if item_id in seen:
            continue
        seen.add(item_id)
        ordered.append(item_id)
    return ordered


def _sum_prices(ids: Iterable[str], prices: Mapping[str, Decimal], unresolved: list[str]) -> Decimal:
    total = ZERO
    for item_id in unique_ids(ids):
        price = prices.get(item_id)
        if price is None:
            unresolved.append(item_id)
            continue
        total += Decimal(price)
    return total.quantize(CENTS)


def breakdown_amount(
    product_ids: Iterable[str],
    service_ids: Iterable[str],
    snapshot: CatalogSnapshot,
) -> AmountBreakdown:
    """Sum selected product and service prices; unknown ids add nothing."""
    unresolved: list[str] = []
    product_total = _sum_prices(product_ids, snapshot.product_prices, unresolved)
    service_total = _sum_prices(service_ids, snapshot.service_prices, unresolved)
    return AmountBreakdown(
        product_total=product_total,
        service_total=service_total,
        unresolved_ids=tuple(unresolved),
    )


def calculate_amount(
    product_ids: Iterable[str],
    service_ids: Iterable[str],
    snapshot: CatalogSnapshot,
) -> Decimal:
    """Return the summed price of the selected items."""
    return breakdown_amount(product_ids, service_ids, snapshot).total


def resolve_potential_amount(calculated: Decimal, entered: Decimal | None) -> Decimal:
    """Pick the amount stored on a new lead.

    A positive calculated total replaces whatever was typed; a zero total
    leaves the manually entered amount in place.
    """
    if calculated > ZERO:
        return calculated.quantize(CENTS)
    return Decimal(entered if entered is not None else ZERO).quantize(CENTS)
