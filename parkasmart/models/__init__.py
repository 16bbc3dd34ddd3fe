"""Import all models so SQLModel.metadata picks them up."""

from parkasmart.models.parking_entry import (
    EntryCreate,
    EntryCreated,
    EntryPayment,
    EntryRead,
    ParkingEntry,
    PaymentMethod,
    TenantType,
)
from parkasmart.models.tenant import Tenant, TenantCreate, TenantRead, TenantUpdate

__all__ = [
    "EntryCreate",
    "EntryCreated",
    "EntryPayment",
    "EntryRead",
    "ParkingEntry",
    "PaymentMethod",
    "Tenant",
    "TenantCreate",
    "TenantRead",
    "TenantType",
    "TenantUpdate",
]
