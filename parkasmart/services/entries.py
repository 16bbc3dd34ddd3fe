"""Entry service — logging vehicles, settling payments, today's log."""

import logging
import uuid
from collections.abc import Callable
from datetime import date

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from parkasmart.core.clock import Clock
from parkasmart.core.config import get_settings
from parkasmart.core.errors import ConflictError, ValidationError
from parkasmart.models.base import utcnow
from parkasmart.models.parking_entry import (
    EntryCreate,
    ParkingEntry,
    PaymentMethod,
    TenantType,
)
from parkasmart.models.tenant import Tenant
from parkasmart.services.plates import normalize_plate
from parkasmart.services.receipts import Receipt
from parkasmart.services.refcodes import generate_reference_code
from parkasmart.services.tenants import search_tenants

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("plate_number", "tenant_type", "payment_method", "amount_paid")
REFERENCE_ATTEMPTS = 3

ReceiptDispatcher = Callable[[Receipt], None]


async def lookup_by_plate(session: AsyncSession, partial_or_full: str) -> list[Tenant]:
    """Autocomplete suggestions for the entry form."""
    return await search_tenants(session, partial_or_full)


def _missing_fields(data: EntryCreate) -> list[str]:
    missing = []
    for field in REQUIRED_FIELDS:
        value = getattr(data, field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing


async def create_entry(
    session: AsyncSession,
    data: EntryCreate,
    clock: Clock,
    dispatch_receipt: ReceiptDispatcher | None = None,
) -> ParkingEntry:
    """Persist a new entry and schedule its receipt when a phone is given.

    ``dispatch_receipt`` must only schedule work; whatever it raises is
    logged and the entry still stands.
    """
    missing = _missing_fields(data)
    if missing:
        raise ValidationError(f"{', '.join(missing)} required", fields=missing)

    prefix = get_settings().reference_prefix
    now = clock.now()
    entry_time = clock.timestamp()

    for _ in range(REFERENCE_ATTEMPTS):
        code = generate_reference_code(prefix)
        entry = ParkingEntry(
            plate_number=normalize_plate(data.plate_number),
            driver_name=data.driver_name,
            phone=data.phone,
            shop_number=data.shop_number,
            building=data.building,
            tenant_type=data.tenant_type,
            payment_method=data.payment_method,
            amount_paid=data.amount_paid,
            is_paid=True if data.is_paid is None else data.is_paid,
            entry_time=entry_time,
            reference_code=code,
        )
        session.add(entry)
        try:
            await session.commit()
            break
        except IntegrityError:
            await session.rollback()
            logger.warning("Reference code %s collided, regenerating", code)
    else:
        raise ConflictError("Could not allocate a unique reference code")

    await session.refresh(entry)

    if entry.phone and dispatch_receipt is not None:
        receipt = Receipt(
            phone=entry.phone,
            plate=entry.plate_number,
            amount=entry.amount_paid,
            method=entry.payment_method,
            building=entry.building,
            reference_code=entry.reference_code,
            issued_at=now,
        )
        try:
            dispatch_receipt(receipt)
        except Exception:
            logger.exception("Receipt dispatch failed for %s", entry.reference_code)

    return entry


async def mark_paid(
    session: AsyncSession,
    entry_id: uuid.UUID,
    payment_method: PaymentMethod | None = None,
    amount_paid: int | None = None,
) -> ParkingEntry | None:
    """Settle an entry. Unknown ids are a silent no-op returning None."""
    if amount_paid is not None and amount_paid < 0:
        raise ValidationError("amount_paid must be >= 0", fields=["amount_paid"])
    entry = await session.get(ParkingEntry, entry_id)
    if entry is None:
        return None
    entry.is_paid = True
    if payment_method:
        entry.payment_method = payment_method
    if amount_paid is not None:
        entry.amount_paid = amount_paid
    entry.updated_at = utcnow()
    session.add(entry)
    await session.commit()
    await session.refresh(entry)
    return entry


async def entries_on(session: AsyncSession, day: date) -> list[ParkingEntry]:
    """Every entry whose timestamp carries ``day`` as its date prefix."""
    stmt = select(ParkingEntry).where(
        ParkingEntry.entry_time.startswith(day.isoformat(), autoescape=True)  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_today(
    session: AsyncSession,
    clock: Clock,
    building: str | None = None,
    tenant_type: TenantType | None = None,
    payment_method: PaymentMethod | None = None,
    search: str | None = None,
) -> list[ParkingEntry]:
    """Today's log, newest first, with the desk's optional filters."""
    filters = [
        ParkingEntry.entry_time.startswith(clock.today().isoformat(), autoescape=True),  # type: ignore[attr-defined]
    ]
    if building:
        filters.append(ParkingEntry.building == building)
    if tenant_type:
        filters.append(ParkingEntry.tenant_type == tenant_type)
    if payment_method:
        filters.append(ParkingEntry.payment_method == payment_method)
    if search:
        filters.append(or_(
            ParkingEntry.plate_number.contains(search.upper(), autoescape=True),  # type: ignore[attr-defined]
            func.lower(ParkingEntry.driver_name).contains(search.lower(), autoescape=True),
        ))

    stmt = (
        select(ParkingEntry)
        .where(*filters)
        .order_by(ParkingEntry.entry_time.desc())  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def find_unpaid_today(
    session: AsyncSession, plate: str, clock: Clock
) -> ParkingEntry | None:
    """Earliest unpaid entry for ``plate`` logged today."""
    stmt = (
        select(ParkingEntry)
        .where(
            ParkingEntry.entry_time.startswith(clock.today().isoformat(), autoescape=True),  # type: ignore[attr-defined]
            ParkingEntry.plate_number == normalize_plate(plate),
            ParkingEntry.is_paid.is_(False),  # type: ignore[attr-defined]
        )
        .order_by(ParkingEntry.entry_time)
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
