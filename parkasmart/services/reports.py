"""Daily report — today's aggregate and the manager's SMS summary."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from parkasmart.core.clock import Clock
from parkasmart.core.errors import ConfigurationError
from parkasmart.services.aggregation import (
    DailyStats,
    DailySummary,
    aggregate_entries,
    entries_for_day,
)
from parkasmart.services.entries import entries_on
from parkasmart.services.sms import SmsSink

logger = logging.getLogger(__name__)


async def compute_day(session: AsyncSession, day: date) -> DailyStats:
    entries = entries_for_day(await entries_on(session, day), day)
    return aggregate_entries(entries, day)


async def compute_today(session: AsyncSession, clock: Clock) -> DailyStats:
    return await compute_day(session, clock.today())


def format_daily_report(summary: DailySummary) -> str:
    year, month, day = summary.date.split("-")
    return "\n".join([
        "ParkaSmart Report",
        f"{day}/{month}/{year[-2:]}",
        "",
        f"Vehicles: {summary.total_vehicles}",
        f"Tenants: {summary.tenant_count} | Non: {summary.non_tenant_count}"
        f" | Boda: {summary.motorcycle_count}",
        "",
        f"Cash: Ksh {summary.cash_total:,}",
        f"M-Pesa: Ksh {summary.mpesa_total:,}",
        f"Total: Ksh {summary.grand_total:,}",
        "",
        f"Paid: {summary.paid_count} | Unpaid: {summary.unpaid_count}",
    ])


async def send_daily_report(
    session: AsyncSession,
    destination: str | None,
    sink: SmsSink,
    clock: Clock,
) -> DailySummary:
    """Text today's summary to ``destination``.

    Raises ConfigurationError without a destination; DeliveryError from
    the sink reaches the caller unchanged.
    """
    if not destination:
        raise ConfigurationError("MANAGER_PHONE not configured")

    summary = (await compute_today(session, clock)).summary()
    await sink.send([destination], format_daily_report(summary))
    logger.info("Daily report for %s sent to %s", summary.date, destination)
    return summary
