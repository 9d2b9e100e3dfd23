from __future__ import annotations

from decimal import Decimal

from leadbook.services.amount_calculator import (
    CatalogSnapshot,
    breakdown_amount,
    calculate_amount,
    resolve_potential_amount,
    unique_ids,
)

SNAPSHOT = CatalogSnapshot(
    product_prices={"p-large": Decimal("2500.00"), "p-small": Decimal("1200.00"), "p-free": Decimal("0")},
    service_prices={"s-install": Decimal("2000.00"), "s-train": Decimal("3000.50")},
)


def test_total_is_exact_sum_of_selected_prices():
    total = calculate_amount(["p-large", "p-small"], ["s-train"], SNAPSHOT)
    assert total == Decimal("6700.50")


def test_two_products_no_services():
    assert calculate_amount(["p-large", "p-small"], [], SNAPSHOT) == Decimal("3700.00")


def test_unknown_ids_contribute_zero():
    assert calculate_amount(["p-large", "missing"], ["nope"], SNAPSHOT) == Decimal("2500.00")


def test_product_id_is_not_priced_from_service_table():
    assert calculate_amount(["s-install"], [], SNAPSHOT) == Decimal("0.00")


def test_duplicate_selection_counts_once():
    assert calculate_amount(["p-small", "p-small"], [], SNAPSHOT) == Decimal("1200.00")


def test_empty_selection_is_zero():
    assert calculate_amount([], [], SNAPSHOT) == Decimal("0.00")


def test_breakdown_reports_unresolved_ids():
    breakdown = breakdown_amount(["p-large", "ghost"], ["s-install", "phantom"], SNAPSHOT)
    assert breakdown.product_total == Decimal("2500.00")
    assert breakdown.service_total == Decimal("2000.00")
    assert breakdown.total == Decimal("4500.00")
    assert breakdown.unresolved_ids == ("ghost", "phantom")


def test_positive_calculated_amount_replaces_entered_amount():
    assert resolve_potential_amount(Decimal("3700.00"), Decimal("100")) == Decimal("3700.00")


def test_zero_calculated_amount_keeps_manual_entry():
    assert resolve_potential_amount(Decimal("0"), Decimal("850.25")) == Decimal("850.25")
    assert resolve_potential_amount(Decimal("0"), None) == Decimal("0.00")


def test_snapshot_filters_to_known_ids():
    assert SNAPSHOT.known_products(["p-free", "x", "p-free"]) == ["p-free"]
    assert SNAPSHOT.known_services(["s-train", "p-large"]) == ["s-train"]


def test_unique_ids_keeps_first_seen_order():
    assert unique_ids(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
