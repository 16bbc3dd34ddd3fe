"""Unit tests for daily aggregation."""

import random
from dataclasses import dataclass
from datetime import date

from parkasmart.services.aggregation import (
    aggregate_entries,
    entries_for_day,
    entry_date,
)

DAY = date(2026, 10, 19)


@dataclass
class Row:
    tenant_type: str
    payment_method: str
    amount_paid: int
    is_paid: bool = True
    building: str | None = None
    entry_time: str = "2026-10-19T09:00:00.000+03:00"


def _sample() -> list[Row]:
    return [
        Row("tenant", "cash", 300, building="OTC Mall"),
        Row("tenant", "mpesa", 300, building="Mathai S"),
        Row("non-tenant", "cash", 300, is_paid=False, building="OTC Mall"),
        Row("motorcycle", "mpesa", 100),
        Row("motorcycle", "cash", 100, building=""),
        Row("non-tenant", "mpesa", 250, building="Mathai S"),
    ]


def test_empty_input_is_all_zero():
    stats = aggregate_entries([], DAY)
    assert stats.date == "2026-10-19"
    assert stats.total_vehicles == 0
    assert stats.grand_total == 0
    assert stats.cash_total == 0
    assert stats.mpesa_total == 0
    assert stats.paid_count == 0
    assert stats.unpaid_count == 0
    assert stats.building_breakdown == []


def test_counts_and_revenue():
    stats = aggregate_entries(_sample(), DAY)
    assert stats.total_vehicles == 6
    assert stats.grand_total == 1350
    assert (stats.tenant_count, stats.tenant_revenue) == (2, 600)
    assert (stats.non_tenant_count, stats.non_tenant_revenue) == (2, 550)
    assert (stats.motorcycle_count, stats.motorcycle_revenue) == (2, 200)
    assert stats.cash_total == 700
    assert stats.mpesa_total == 650
    assert stats.paid_count == 5
    assert stats.unpaid_count == 1


def test_building_breakdown_skips_blank_buildings():
    stats = aggregate_entries(_sample(), DAY)
    breakdown = [(b.building, b.count, b.total) for b in stats.building_breakdown]
    assert breakdown == [("Mathai S", 2, 550), ("OTC Mall", 2, 600)]


def test_whitespace_building_has_no_bucket():
    rows = [
        Row("tenant", "cash", 300, building="  "),
        Row("tenant", "cash", 300, building="OTC Mall"),
    ]
    stats = aggregate_entries(rows, DAY)
    assert [b.building for b in stats.building_breakdown] == ["OTC Mall"]
    assert stats.total_vehicles == 2


def test_partitions_add_up():
    stats = aggregate_entries(_sample(), DAY)
    assert (
        stats.tenant_count + stats.non_tenant_count + stats.motorcycle_count
        == stats.total_vehicles
    )
    assert stats.cash_total + stats.mpesa_total == stats.grand_total
    assert stats.paid_count + stats.unpaid_count == stats.total_vehicles


def test_order_does_not_matter():
    rows = _sample()
    expected = aggregate_entries(rows, DAY)
    rng = random.Random(7)
    for _ in range(10):
        shuffled = rows[:]
        rng.shuffle(shuffled)
        assert aggregate_entries(shuffled, DAY) == expected


def test_summary_drops_revenue_splits_and_buildings():
    summary = aggregate_entries(_sample(), DAY).summary()
    data = summary.model_dump()
    assert "building_breakdown" not in data
    assert "tenant_revenue" not in data
    assert data["grand_total"] == 1350
    assert data["motorcycle_count"] == 2


def test_entry_date_parsing():
    assert entry_date("2026-10-19T09:00:00+03:00") == DAY
    assert entry_date("2026-10-19") == DAY
    assert entry_date("19/10/2026") is None
    assert entry_date("2026-13-40T00:00") is None
    assert entry_date("") is None
    assert entry_date(None) is None


def test_day_scoping_excludes_other_days_and_bad_timestamps():
    rows = [
        Row("tenant", "cash", 300),
        Row("tenant", "cash", 300, entry_time="2026-10-18T23:59:59.000+03:00"),
        Row("tenant", "cash", 300, entry_time="garbage"),
        Row("tenant", "cash", 300, entry_time=""),
    ]
    scoped = entries_for_day(rows, DAY)
    assert scoped == [rows[0]]
