"""ParkingEntry model — one parking transaction for one day."""

import uuid
from enum import StrEnum

from sqlmodel import Field, SQLModel

from parkasmart.models.base import TimestampMixin, new_uuid


class TenantType(StrEnum):
    TENANT = "tenant"
    NON_TENANT = "non-tenant"
    MOTORCYCLE = "motorcycle"


class PaymentMethod(StrEnum):
    CASH = "cash"
    MPESA = "mpesa"

    @property
    def label(self) -> str:
        return "M-Pesa" if self is PaymentMethod.MPESA else "Cash"


class ParkingEntry(TimestampMixin, SQLModel, table=True):
    __tablename__ = "parking_entries"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    # Denormalized; may or may not match a Tenant
    plate_number: str = Field(max_length=20, nullable=False, index=True)
    driver_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    shop_number: str | None = Field(default=None, max_length=50)
    building: str | None = Field(default=None, max_length=255, index=True)

    tenant_type: TenantType = Field(nullable=False)
    payment_method: PaymentMethod = Field(nullable=False)
    amount_paid: int = Field(nullable=False, ge=0)
    is_paid: bool = Field(default=False)

    # ISO-8601 local time; the YYYY-MM-DD prefix scopes entries to a day
    entry_time: str = Field(max_length=40, nullable=False, index=True)
    reference_code: str = Field(max_length=40, unique=True, nullable=False, index=True)


# ── Pydantic schemas ─────────────────────────────────────────

class EntryCreate(SQLModel):
    """Inbound entry. Required fields are checked by the entry service."""
    plate_number: str | None = Field(default=None, max_length=20)
    tenant_type: TenantType | None = None
    payment_method: PaymentMethod | None = None
    amount_paid: int | None = Field(default=None, ge=0)
    is_paid: bool | None = None
    driver_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    shop_number: str | None = Field(default=None, max_length=50)
    building: str | None = Field(default=None, max_length=255)


class EntryPayment(SQLModel):
    payment_method: PaymentMethod | None = None
    amount_paid: int | None = Field(default=None, ge=0)


class EntryRead(SQLModel):
    id: uuid.UUID
    plate_number: str
    driver_name: str | None = None
    phone: str | None = None
    shop_number: str | None = None
    building: str | None = None
    tenant_type: TenantType
    payment_method: PaymentMethod
    amount_paid: int
    is_paid: bool
    entry_time: str
    reference_code: str


class EntryCreated(SQLModel):
    id: uuid.UUID
    reference_code: str
    entry_time: str
