"""Customer receipts — formatted at entry time, delivered by the worker."""

import logging
from dataclasses import dataclass
from datetime import datetime

from arq.connections import ArqRedis, create_pool

from parkasmart.models.parking_entry import PaymentMethod
from parkasmart.workers.main import _redis_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Receipt:
    phone: str
    plate: str
    amount: int
    method: PaymentMethod
    building: str | None
    reference_code: str
    issued_at: datetime


def format_receipt(receipt: Receipt) -> str:
    ts = receipt.issued_at
    return "\n".join([
        "ParkaSmart ✓",
        f"Plate: {receipt.plate}",
        f"Location: {receipt.building or 'N/A'}",
        f"Amount: Ksh {receipt.amount:,} ({PaymentMethod(receipt.method).label})",
        f"Time: {ts:%H:%M} | {ts:%d/%m/%y}",
        f"Ref: {receipt.reference_code}",
        "Thank you for parking with us!",
    ])


async def enqueue_receipt(receipt: Receipt) -> None:
    """Hand the receipt to the ARQ worker. Never raises."""
    try:
        redis: ArqRedis = await create_pool(_redis_settings())
        try:
            await redis.enqueue_job(
                "send_receipt",
                phone=receipt.phone,
                message=format_receipt(receipt),
                reference_code=receipt.reference_code,
            )
        finally:
            await redis.aclose()
    except Exception:
        logger.exception("Could not enqueue receipt for %s", receipt.reference_code)
