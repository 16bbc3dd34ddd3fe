"""Tenant model — a pre-registered vehicle with a standing monthly rate."""

import uuid

from sqlmodel import Field, SQLModel

from parkasmart.models.base import TimestampMixin, new_uuid


class Tenant(TimestampMixin, SQLModel, table=True):
    __tablename__ = "tenants"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    # Canonical uppercase form, immutable once set
    plate_number: str = Field(max_length=20, unique=True, nullable=False, index=True)
    name: str = Field(max_length=255, nullable=False)
    phone: str | None = Field(default=None, max_length=30)
    shop_number: str | None = Field(default=None, max_length=50)
    floor_code: str | None = Field(default=None, max_length=50)
    building: str = Field(max_length=255, nullable=False)
    monthly_rate: int = Field(ge=0)

    # Soft delete
    is_active: bool = Field(default=True)


# ── Pydantic schemas (read / create / update) ────────────────

class TenantCreate(SQLModel):
    plate_number: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=255)
    building: str = Field(min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    shop_number: str | None = Field(default=None, max_length=50)
    floor_code: str | None = Field(default=None, max_length=50)
    # Falls back to the configured tenant rate
    monthly_rate: int | None = Field(default=None, ge=0)


class TenantUpdate(SQLModel):
    """Partial update. The plate number is deliberately absent."""
    name: str | None = Field(default=None, min_length=1, max_length=255)
    building: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    shop_number: str | None = Field(default=None, max_length=50)
    floor_code: str | None = Field(default=None, max_length=50)
    monthly_rate: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class TenantRead(SQLModel):
    id: uuid.UUID
    plate_number: str
    name: str
    phone: str | None = None
    shop_number: str | None = None
    floor_code: str | None = None
    building: str
    monthly_rate: int
    is_active: bool
