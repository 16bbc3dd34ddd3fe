"""Plate helper endpoint tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_check_plate(client: AsyncClient):
    resp = await client.get("/v1/plates/check", params={"plate": "KDA456B"})
    assert resp.json() == {
        "plate": "KDA456B",
        "valid": True,
        "partial": True,
        "normalized": "KDA 456B",
    }

    resp = await client.get("/v1/plates/check", params={"plate": "KD5"})
    data = resp.json()
    assert data["valid"] is False
    assert data["partial"] is False


@pytest.mark.asyncio
async def test_paste_plate(client: AsyncClient):
    resp = await client.post("/v1/plates/paste", json={"text": "kda-456 b"})
    assert resp.status_code == 200
    assert resp.json() == {
        "slots": ["K", "D", "A", "4", "5", "6", "B"],
        "plate": "KDA 456B",
        "valid": True,
    }


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}
