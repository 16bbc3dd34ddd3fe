"""Parking entry endpoints."""

import uuid

from fastapi import APIRouter, status
from pydantic import BaseModel

from parkasmart.api.deps import ClockDep, Receipts, Session
from parkasmart.models.parking_entry import (
    EntryCreate,
    EntryCreated,
    EntryPayment,
    EntryRead,
    PaymentMethod,
    TenantType,
)
from parkasmart.services import entries as entry_service

router = APIRouter(prefix="/entries", tags=["entries"])


# ── Schemas ──────────────────────────────────────────────────

class EntryList(BaseModel):
    entries: list[EntryRead]
    total_vehicles: int
    total_collected: int


class PaymentResult(BaseModel):
    success: bool
    updated: bool


# ── Routes ───────────────────────────────────────────────────

@router.get("", response_model=EntryList)
async def list_entries(
    session: Session,
    clock: ClockDep,
    building: str | None = None,
    tenant_type: TenantType | None = None,
    payment_method: PaymentMethod | None = None,
    search: str | None = None,
) -> EntryList:
    """Today's entries, newest first."""
    entries = await entry_service.list_today(
        session,
        clock,
        building=building,
        tenant_type=tenant_type,
        payment_method=payment_method,
        search=search,
    )
    return EntryList(
        entries=[EntryRead.model_validate(e) for e in entries],
        total_vehicles=len(entries),
        total_collected=sum(e.amount_paid for e in entries),
    )


@router.post("", response_model=EntryCreated, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: EntryCreate,
    session: Session,
    clock: ClockDep,
    receipts: Receipts,
) -> EntryCreated:
    """Log a vehicle. A receipt SMS is queued when a phone is supplied."""
    entry = await entry_service.create_entry(session, body, clock, receipts)
    return EntryCreated(
        id=entry.id,
        reference_code=entry.reference_code,
        entry_time=entry.entry_time,
    )


@router.put("/{entry_id}/pay", response_model=PaymentResult)
async def mark_paid(
    entry_id: uuid.UUID,
    session: Session,
    body: EntryPayment | None = None,
) -> PaymentResult:
    """Settle an entry; an unknown id is accepted and reported as not updated."""
    body = body or EntryPayment()
    entry = await entry_service.mark_paid(
        session,
        entry_id,
        payment_method=body.payment_method,
        amount_paid=body.amount_paid,
    )
    return PaymentResult(success=True, updated=entry is not None)
