"""Tenant registry tests."""

import uuid
from unittest.mock import patch

import pytest
from httpx import AsyncClient
from sqlmodel import select

from parkasmart.core.config import Settings
from parkasmart.core.errors import ConflictError, NotFoundError, ValidationError
from parkasmart.models.base import utcnow
from parkasmart.models.tenant import Tenant, TenantCreate, TenantUpdate
from parkasmart.seed import DEMO_TENANTS, seed_tenants
from parkasmart.services.tenants import (
    create_tenant,
    deactivate_tenant,
    get_tenant_by_plate,
    search_tenants,
    update_tenant,
)


async def _create(client: AsyncClient, plate: str, **extra) -> dict:
    resp = await client.post("/v1/tenants", json={
        "plate_number": plate,
        "name": extra.pop("name", "James Mwangi"),
        "building": extra.pop("building", "OTC Mall"),
        **extra,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_create_tenant(client: AsyncClient):
    data = await _create(client, "kda456b", phone="+254712345678", shop_number="015")
    assert data["plate_number"] == "KDA 456B"
    assert data["monthly_rate"] == 300
    assert data["is_active"] is True
    assert data["phone"] == "+254712345678"


@pytest.mark.asyncio
async def test_create_tenant_requires_fields(client: AsyncClient):
    resp = await client.post("/v1/tenants", json={"plate_number": "KDA 456B"})
    assert resp.status_code == 422

    resp = await client.post("/v1/tenants", json={
        "plate_number": "KDA 456B", "name": "", "building": "OTC Mall",
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_plate_conflicts(client: AsyncClient):
    first = await _create(client, "KBZ 789C", name="Mary Wanjiku")
    resp = await client.post("/v1/tenants", json={
        "plate_number": "kbz789c",
        "name": "Someone Else",
        "building": "Mathai S",
    })
    assert resp.status_code == 409
    assert "already exists" in resp.json()["detail"]

    listing = (await client.get("/v1/tenants")).json()
    assert len(listing) == 1
    assert listing[0]["id"] == first["id"]
    assert listing[0]["name"] == "Mary Wanjiku"
    assert listing[0]["building"] == "OTC Mall"


@pytest.mark.asyncio
async def test_conflict_leaves_existing_record_unchanged(session):
    original = await create_tenant(session, TenantCreate(
        plate_number="KCE 123A", name="Peter Ochieng", building="Mathai S", monthly_rate=250,
    ))
    with pytest.raises(ConflictError):
        await create_tenant(session, TenantCreate(
            plate_number="KCE 123A", name="Impostor", building="OTC Mall",
        ))

    rows = (await session.execute(select(Tenant))).scalars().all()
    assert len(rows) == 1
    assert rows[0].id == original.id
    assert rows[0].name == "Peter Ochieng"
    assert rows[0].monthly_rate == 250


@pytest.mark.asyncio
async def test_update_tenant_partial(client: AsyncClient):
    tenant = await _create(client, "KDF 321D", name="Alice Njeri")
    resp = await client.patch(f"/v1/tenants/{tenant['id']}", json={
        "monthly_rate": 450,
        "plate_number": "KZZ 999Z",
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["monthly_rate"] == 450
    assert data["name"] == "Alice Njeri"
    # Plate number is immutable
    assert data["plate_number"] == "KDF 321D"


@pytest.mark.asyncio
async def test_update_missing_tenant_404(client: AsyncClient):
    resp = await client.patch(f"/v1/tenants/{uuid.uuid4()}", json={"name": "Nobody"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_deactivate_is_soft_delete(client: AsyncClient):
    tenant = await _create(client, "KAA 654E", name="Samuel Kiprop")
    resp = await client.delete(f"/v1/tenants/{tenant['id']}")
    assert resp.status_code == 200
    assert resp.json()["is_active"] is False

    listing = (await client.get("/v1/tenants")).json()
    assert [t["plate_number"] for t in listing] == ["KAA 654E"]
    assert listing[0]["is_active"] is False


@pytest.mark.asyncio
async def test_search_autocomplete(client: AsyncClient):
    for plate in ("KDA 456B", "KDA 457C", "KDB 111A"):
        await _create(client, plate)

    resp = await client.get("/v1/tenants/search", params={"plate": "kda"})
    assert resp.status_code == 200
    assert [t["plate_number"] for t in resp.json()] == ["KDA 456B", "KDA 457C"]

    resp = await client.get("/v1/tenants/search", params={"plate": "K"})
    assert resp.json() == []


@pytest.mark.asyncio
async def test_search_limits_and_skips_inactive(session):
    for i in range(7):
        await create_tenant(session, TenantCreate(
            plate_number=f"KDA {100 + i}A", name=f"Tenant {i}", building="OTC Mall",
        ))
    hidden = await get_tenant_by_plate(session, "KDA 100A")
    await deactivate_tenant(session, hidden.id)

    results = await search_tenants(session, "KDA")
    assert len(results) == 5
    assert "KDA 100A" not in [t.plate_number for t in results]


@pytest.mark.asyncio
async def test_search_query_is_literal(session):
    await create_tenant(session, TenantCreate(
        plate_number="KDA 456B", name="James", building="OTC Mall",
    ))
    assert await search_tenants(session, "%%") == []


@pytest.mark.asyncio
async def test_update_unknown_tenant_raises(session):
    with pytest.raises(NotFoundError):
        await update_tenant(session, uuid.uuid4(), TenantUpdate(name="x"))


@pytest.mark.asyncio
async def test_seed_is_idempotent(session):
    assert await seed_tenants(session) == len(DEMO_TENANTS)
    assert await seed_tenants(session) == 0
    tenant = await get_tenant_by_plate(session, "kda456b")
    assert tenant is not None
    assert tenant.name == "James Mwangi"


@pytest.mark.asyncio
async def test_update_rejects_null_required_fields(client: AsyncClient):
    tenant = await _create(client, "KDF 321D", name="Alice Njeri")
    resp = await client.patch(f"/v1/tenants/{tenant['id']}", json={"name": None})
    assert resp.status_code == 400
    assert "name" in resp.json()["detail"]

    resp = await client.patch(f"/v1/tenants/{tenant['id']}", json={
        "building": None, "is_active": None,
    })
    assert resp.status_code == 400

    listing = (await client.get("/v1/tenants")).json()
    assert listing[0]["name"] == "Alice Njeri"
    assert listing[0]["building"] == "OTC Mall"
    assert listing[0]["is_active"] is True


@pytest.mark.asyncio
async def test_update_null_fields_reported(session):
    tenant = await create_tenant(session, TenantCreate(
        plate_number="KCE 123A", name="Peter Ochieng", building="Mathai S",
    ))
    with pytest.raises(ValidationError) as exc_info:
        await update_tenant(session, tenant.id, TenantUpdate(monthly_rate=None, name=None))
    assert exc_info.value.fields == ["name", "monthly_rate"]


@pytest.mark.asyncio
async def test_update_clears_optional_fields(session):
    tenant = await create_tenant(session, TenantCreate(
        plate_number="KCE 123A", name="Peter Ochieng", building="Mathai S", phone="+254734567890",
    ))
    updated = await update_tenant(session, tenant.id, TenantUpdate(phone=None))
    assert updated.phone is None
    assert updated.name == "Peter Ochieng"


@pytest.mark.asyncio
async def test_monthly_rate_defaults_to_configured_tenant_rate(session):
    with patch(
        "parkasmart.services.tenants.get_settings",
        return_value=Settings(tenant_rate=450),
    ):
        defaulted = await create_tenant(session, TenantCreate(
            plate_number="KDA 456B", name="James Mwangi", building="OTC Mall",
        ))
        explicit = await create_tenant(session, TenantCreate(
            plate_number="KBZ 789C", name="Mary Wanjiku", building="OTC Mall", monthly_rate=250,
        ))
    assert defaulted.monthly_rate == 450
    assert explicit.monthly_rate == 250


def test_timestamps_are_timezone_aware():
    assert utcnow().tzinfo is not None
    assert Tenant.__table__.c.created_at.type.timezone is True
    assert Tenant.__table__.c.updated_at.type.timezone is True
