"""Tenant registry endpoints."""

import uuid

from fastapi import APIRouter, status

from parkasmart.api.deps import Session
from parkasmart.models.tenant import TenantCreate, TenantRead, TenantUpdate
from parkasmart.services import tenants as tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("", response_model=list[TenantRead])
async def list_tenants(session: Session) -> list[TenantRead]:
    """All tenants, including deactivated ones."""
    tenants = await tenant_service.list_tenants(session)
    return [TenantRead.model_validate(t) for t in tenants]


@router.post(
    "",
    response_model=TenantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a tenant vehicle",
)
async def create_tenant(body: TenantCreate, session: Session) -> TenantRead:
    """409 when the plate is already registered."""
    tenant = await tenant_service.create_tenant(session, body)
    return TenantRead.model_validate(tenant)


@router.get("/search", response_model=list[TenantRead])
async def search_tenants(session: Session, plate: str = "") -> list[TenantRead]:
    """Plate autocomplete: up to 5 active tenants, none for < 2 chars."""
    tenants = await tenant_service.search_tenants(session, plate)
    return [TenantRead.model_validate(t) for t in tenants]


@router.patch("/{tenant_id}", response_model=TenantRead)
async def update_tenant(
    tenant_id: uuid.UUID,
    body: TenantUpdate,
    session: Session,
) -> TenantRead:
    tenant = await tenant_service.update_tenant(session, tenant_id, body)
    return TenantRead.model_validate(tenant)


@router.delete("/{tenant_id}", response_model=TenantRead)
async def deactivate_tenant(tenant_id: uuid.UUID, session: Session) -> TenantRead:
    """Soft delete: the tenant stays on record with ``is_active`` false."""
    tenant = await tenant_service.deactivate_tenant(session, tenant_id)
    return TenantRead.model_validate(tenant)
