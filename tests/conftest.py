"""Shared test fixtures — async SQLite in-memory DB, fixed clock, fake SMS."""

from collections.abc import AsyncGenerator
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# Import all models so metadata is populated
import parkasmart.models  # noqa: F401
from parkasmart.api.deps import get_receipt_dispatcher
from parkasmart.core.clock import Clock, get_clock
from parkasmart.core.config import Settings, get_settings
from parkasmart.core.database import get_session
from parkasmart.core.errors import DeliveryError
from parkasmart.main import app
from parkasmart.services.sms import get_sms_sink

NAIROBI = ZoneInfo("Africa/Nairobi")
TODAY = datetime(2026, 10, 19, 9, 15, tzinfo=NAIROBI)
MANAGER_PHONE = "+254700000001"


class FixedClock(Clock):
    """Clock pinned to one moment; tests may reassign ``moment``."""

    def __init__(self, moment: datetime) -> None:
        super().__init__("Africa/Nairobi")
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class FakeSms:
    """Records messages instead of calling the gateway."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[list[str], str]] = []

    async def send(self, recipients: list[str], message: str) -> None:
        if self.fail:
            raise DeliveryError("gateway rejected the message")
        self.sent.append((recipients, message))


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def test_session_factory(engine):
    """Session factory bound to the test SQLite engine."""
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with test_session_factory() as sess:
        yield sess
        await sess.rollback()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def sms() -> FakeSms:
    return FakeSms()


@pytest.fixture
def receipts() -> list:
    """Receipts handed to the dispatcher during a request."""
    return []


@pytest.fixture
async def client(session, clock, sms, receipts) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client with DB, clock, SMS and receipt overrides."""

    async def _override_session():
        yield session

    app.dependency_overrides[get_session] = _override_session
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_settings] = lambda: Settings(manager_phone=MANAGER_PHONE)
    app.dependency_overrides[get_receipt_dispatcher] = lambda: receipts.append

    app.dependency_overrides[get_sms_sink] = lambda: sms

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
