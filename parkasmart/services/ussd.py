"""USSD menu for feature phones.

Nothing is stored between requests: the gateway resends the whole menu path
(``1*KDA456B*2``) and the reply is derived from its shape alone. Replies
starting with ``CON`` keep the session open, ``END`` closes it.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from parkasmart.core.clock import Clock
from parkasmart.core.config import get_settings
from parkasmart.models.parking_entry import EntryCreate, PaymentMethod, TenantType
from parkasmart.services.entries import (
    ReceiptDispatcher,
    create_entry,
    find_unpaid_today,
    mark_paid,
)
from parkasmart.services.plates import normalize_plate
from parkasmart.services.reports import compute_today
from parkasmart.services.tenants import get_tenant_by_plate

SEPARATOR = "*"

LOG_ENTRY = "1"
CHECK_TOTAL = "2"
MARK_PAID = "3"

CONFIRM_CASH = "1"
CONFIRM_MPESA = "2"
CANCEL = "0"

WALK_IN_DRIVER = "Walk-in"
UNKNOWN_BUILDING = "N/A"


def con(text: str) -> str:
    return f"CON {text}"


def end(text: str) -> str:
    return f"END {text}"


def split_path(text: str) -> list[str]:
    return [part for part in text.split(SEPARATOR) if part]


async def handle_ussd(
    session: AsyncSession,
    text: str,
    phone_number: str,
    clock: Clock,
    dispatch_receipt: ReceiptDispatcher | None = None,
) -> str:
    parts = split_path(text or "")

    if not text:
        return con(
            "Welcome to ParkaSmart\n"
            "1. Log Vehicle Entry\n"
            "2. Check Today's Total\n"
            "3. Mark Vehicle as Paid"
        )

    option = parts[0] if parts else ""

    if option == LOG_ENTRY and len(parts) == 1:
        return con("Enter vehicle plate number:")
    if option == LOG_ENTRY and len(parts) == 2:
        return await _confirm_entry(session, parts[1])
    if option == LOG_ENTRY and len(parts) == 3:
        return await _log_entry(
            session, parts[1], parts[2], phone_number, clock, dispatch_receipt
        )
    if option == CHECK_TOTAL and len(parts) == 1:
        stats = await compute_today(session, clock)
        return end(
            "Today's Summary:\n"
            f"Vehicles: {stats.total_vehicles}\n"
            f"Revenue: Ksh {stats.grand_total}"
        )
    if option == MARK_PAID and len(parts) == 1:
        return con("Enter plate number to mark as paid:")
    if option == MARK_PAID and len(parts) == 2:
        return await _settle(session, parts[1], clock)

    return end("Invalid option. Please try again.")


def _payment_menu() -> str:
    return "1. Confirm (Cash)\n2. Confirm (M-Pesa)\n0. Cancel"


async def _confirm_entry(session: AsyncSession, raw_plate: str) -> str:
    plate = normalize_plate(raw_plate)
    tenant = await get_tenant_by_plate(session, plate)
    if tenant is not None:
        return con(
            f"{tenant.name} - {tenant.building}\n"
            f"Amount: Ksh {tenant.monthly_rate}\n"
            f"{_payment_menu()}"
        )
    return con(
        f"Non-tenant vehicle: {plate}\n"
        f"Amount: Ksh {get_settings().non_tenant_rate}\n"
        f"{_payment_menu()}"
    )


async def _log_entry(
    session: AsyncSession,
    raw_plate: str,
    choice: str,
    phone_number: str,
    clock: Clock,
    dispatch_receipt: ReceiptDispatcher | None,
) -> str:
    if choice == CANCEL:
        return end("Entry cancelled.")

    plate = normalize_plate(raw_plate)
    tenant = await get_tenant_by_plate(session, plate)
    method = PaymentMethod.MPESA if choice == CONFIRM_MPESA else PaymentMethod.CASH

    if tenant is not None:
        data = EntryCreate(
            plate_number=plate,
            driver_name=tenant.name,
            phone=tenant.phone or phone_number,
            shop_number=tenant.shop_number,
            building=tenant.building,
            tenant_type=TenantType.TENANT,
            payment_method=method,
            amount_paid=tenant.monthly_rate,
            is_paid=True,
        )
    else:
        data = EntryCreate(
            plate_number=plate,
            driver_name=WALK_IN_DRIVER,
            phone=phone_number or None,
            building=UNKNOWN_BUILDING,
            tenant_type=TenantType.NON_TENANT,
            payment_method=method,
            amount_paid=get_settings().non_tenant_rate,
            is_paid=True,
        )

    entry = await create_entry(session, data, clock, dispatch_receipt)
    return end(
        f"Vehicle {entry.plate_number} logged.\n"
        f"Ref: {entry.reference_code}\n"
        f"Method: {method.label}"
    )


async def _settle(session: AsyncSession, raw_plate: str, clock: Clock) -> str:
    plate = normalize_plate(raw_plate)
    entry = await find_unpaid_today(session, plate, clock)
    if entry is None:
        return end(f"No unpaid entry found for {plate} today.")
    await mark_paid(session, entry.id)
    return end(f"{plate} marked as PAID.\nRef: {entry.reference_code}")
