"""Seed the demo tenants: ``python -m parkasmart.seed``."""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from parkasmart.core.database import async_session_factory, init_db
from parkasmart.core.errors import ConflictError
from parkasmart.models.tenant import TenantCreate
from parkasmart.services.tenants import create_tenant

logger = logging.getLogger(__name__)

DEMO_TENANTS = [
    TenantCreate(plate_number="KDA 456B", name="James Mwangi", phone="+254712345678",
                 shop_number="015", floor_code="F2B", building="OTC Mall"),
    TenantCreate(plate_number="KBZ 789C", name="Mary Wanjiku", phone="+254723456789",
                 shop_number="051", floor_code="GA", building="OTC Mall"),
    TenantCreate(plate_number="KCE 123A", name="Peter Ochieng", phone="+254734567890",
                 shop_number="012", floor_code="GC", building="Mathai S"),
    TenantCreate(plate_number="KDF 321D", name="Alice Njeri", phone="+254745678901",
                 shop_number="008", floor_code="F4", building="OTC Mall"),
    TenantCreate(plate_number="KAA 654E", name="Samuel Kiprop", phone="+254756789012",
                 shop_number="023", floor_code="GA", building="Mathai S"),
]


async def seed_tenants(session: AsyncSession) -> int:
    """Insert the demo tenants, skipping plates already registered."""
    created = 0
    for data in DEMO_TENANTS:
        try:
            await create_tenant(session, data)
        except ConflictError:
            logger.info("Tenant %s already present, skipped", data.plate_number)
            continue
        created += 1
    return created


async def main() -> None:
    await init_db()
    async with async_session_factory() as session:
        created = await seed_tenants(session)
    logger.info("Seeded %d tenants", created)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
