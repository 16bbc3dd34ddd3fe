"""Daily statistics over parking entries.

Everything here is a plain sum or count, so results do not depend on the
order entries arrive in. The building breakdown is sorted by name.
"""

import re
from collections.abc import Iterable
from datetime import date
from typing import Protocol

from pydantic import BaseModel

from parkasmart.models.parking_entry import PaymentMethod, TenantType

_DATE_PREFIX_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


class EntryLike(Protocol):
    tenant_type: str
    payment_method: str
    amount_paid: int
    is_paid: bool
    building: str | None
    entry_time: str


# ── Schemas ──────────────────────────────────────────────────

class BuildingTotal(BaseModel):
    building: str
    count: int
    total: int


class DailySummary(BaseModel):
    """Reduced figures carried by the SMS report."""
    date: str
    total_vehicles: int
    tenant_count: int
    non_tenant_count: int
    motorcycle_count: int
    cash_total: int
    mpesa_total: int
    grand_total: int
    paid_count: int
    unpaid_count: int


class DailyStats(BaseModel):
    date: str
    total_vehicles: int = 0
    tenant_count: int = 0
    tenant_revenue: int = 0
    non_tenant_count: int = 0
    non_tenant_revenue: int = 0
    motorcycle_count: int = 0
    motorcycle_revenue: int = 0
    cash_total: int = 0
    mpesa_total: int = 0
    grand_total: int = 0
    paid_count: int = 0
    unpaid_count: int = 0
    building_breakdown: list[BuildingTotal] = []

    def summary(self) -> DailySummary:
        return DailySummary.model_validate(
            self.model_dump(exclude={
                "tenant_revenue",
                "non_tenant_revenue",
                "motorcycle_revenue",
                "building_breakdown",
            })
        )


# ── Computation ──────────────────────────────────────────────

def entry_date(entry_time: str | None) -> date | None:
    """Calendar date from an ISO-8601 timestamp prefix, or None if malformed."""
    if not entry_time:
        return None
    match = _DATE_PREFIX_RE.match(entry_time)
    if match is None:
        return None
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return None


def entries_for_day(entries: Iterable[EntryLike], day: date) -> list[EntryLike]:
    """Entries stamped on ``day``; unparseable timestamps are dropped."""
    return [e for e in entries if entry_date(e.entry_time) == day]


def aggregate_entries(entries: Iterable[EntryLike], day: date) -> DailyStats:
    """Single pass over already day-scoped entries."""
    stats = DailyStats(date=day.isoformat())
    buildings: dict[str, list[int]] = {}

    for entry in entries:
        amount = entry.amount_paid or 0
        stats.total_vehicles += 1
        stats.grand_total += amount

        if entry.tenant_type == TenantType.TENANT:
            stats.tenant_count += 1
            stats.tenant_revenue += amount
        elif entry.tenant_type == TenantType.NON_TENANT:
            stats.non_tenant_count += 1
            stats.non_tenant_revenue += amount
        elif entry.tenant_type == TenantType.MOTORCYCLE:
            stats.motorcycle_count += 1
            stats.motorcycle_revenue += amount

        if entry.payment_method == PaymentMethod.CASH:
            stats.cash_total += amount
        elif entry.payment_method == PaymentMethod.MPESA:
            stats.mpesa_total += amount

        if entry.is_paid:
            stats.paid_count += 1
        else:
            stats.unpaid_count += 1

        if entry.building and entry.building.strip():
            bucket = buildings.setdefault(entry.building, [0, 0])
            bucket[0] += 1
            bucket[1] += amount

    stats.building_breakdown = [
        BuildingTotal(building=name, count=count, total=total)
        for name, (count, total) in sorted(buildings.items())
    ]
    return stats
