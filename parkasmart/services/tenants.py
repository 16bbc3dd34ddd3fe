"""Tenant registry — CRUD, soft deactivation and plate search."""

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from parkasmart.core.config import get_settings
from parkasmart.core.errors import ConflictError, NotFoundError, ValidationError
from parkasmart.models.base import utcnow
from parkasmart.models.tenant import Tenant, TenantCreate, TenantUpdate
from parkasmart.services.plates import normalize_plate

SEARCH_MIN_CHARS = 2
SEARCH_LIMIT = 5

# Columns a partial update may change but never blank out
NON_NULLABLE_FIELDS = ("name", "building", "monthly_rate", "is_active")


async def list_tenants(session: AsyncSession) -> list[Tenant]:
    result = await session.execute(select(Tenant).order_by(Tenant.plate_number))
    return list(result.scalars().all())


async def get_tenant(session: AsyncSession, tenant_id: uuid.UUID) -> Tenant:
    tenant = await session.get(Tenant, tenant_id)
    if tenant is None:
        raise NotFoundError("Tenant not found")
    return tenant


async def get_tenant_by_plate(session: AsyncSession, plate: str) -> Tenant | None:
    """Exact match on the canonical plate, active or not."""
    result = await session.execute(
        select(Tenant).where(Tenant.plate_number == normalize_plate(plate))
    )
    return result.scalar_one_or_none()


async def create_tenant(session: AsyncSession, data: TenantCreate) -> Tenant:
    plate = normalize_plate(data.plate_number)
    if await get_tenant_by_plate(session, plate) is not None:
        raise ConflictError(f"Plate number {plate} already exists")

    fields = data.model_dump(exclude={"plate_number", "monthly_rate"})
    rate = data.monthly_rate
    if rate is None:
        rate = get_settings().tenant_rate
    tenant = Tenant(**fields, plate_number=plate, monthly_rate=rate)
    session.add(tenant)
    try:
        await session.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent registration of the same plate
        await session.rollback()
        raise ConflictError(f"Plate number {plate} already exists") from exc
    await session.refresh(tenant)
    return tenant


async def update_tenant(
    session: AsyncSession, tenant_id: uuid.UUID, data: TenantUpdate
) -> Tenant:
    changes = data.model_dump(exclude_unset=True)
    nulled = [f for f in NON_NULLABLE_FIELDS if f in changes and changes[f] is None]
    if nulled:
        raise ValidationError(f"{', '.join(nulled)} cannot be null", fields=nulled)

    tenant = await get_tenant(session, tenant_id)
    for field, value in changes.items():
        setattr(tenant, field, value)
    tenant.updated_at = utcnow()
    session.add(tenant)
    await session.commit()
    await session.refresh(tenant)
    return tenant


async def deactivate_tenant(session: AsyncSession, tenant_id: uuid.UUID) -> Tenant:
    return await update_tenant(session, tenant_id, TenantUpdate(is_active=False))


async def search_tenants(session: AsyncSession, query: str) -> list[Tenant]:
    """Autocomplete: active tenants whose plate contains ``query``."""
    if len(query) < SEARCH_MIN_CHARS:
        return []
    stmt = (
        select(Tenant)
        .where(
            Tenant.plate_number.contains(query.upper(), autoescape=True),  # type: ignore[attr-defined]
            Tenant.is_active.is_(True),  # type: ignore[union-attr]
        )
        .order_by(Tenant.plate_number)
        .limit(SEARCH_LIMIT)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())
