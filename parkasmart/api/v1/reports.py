"""Daily report endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from parkasmart.api.deps import ClockDep, Session, SettingsDep, SmsDep
from parkasmart.services import reports as report_service
from parkasmart.services.aggregation import DailyStats, DailySummary

router = APIRouter(prefix="/reports", tags=["reports"])


class ReportSent(BaseModel):
    success: bool
    message: str
    summary: DailySummary


@router.get("/today", response_model=DailyStats)
async def get_today(session: Session, clock: ClockDep) -> DailyStats:
    """Aggregate of today's entries, including the building breakdown."""
    return await report_service.compute_today(session, clock)


@router.post("/send", response_model=ReportSent)
async def send_today(
    session: Session,
    clock: ClockDep,
    sms: SmsDep,
    settings: SettingsDep,
) -> ReportSent:
    """Text today's summary to the manager (500 unconfigured, 502 undelivered)."""
    summary = await report_service.send_daily_report(
        session, settings.manager_phone, sms, clock
    )
    return ReportSent(success=True, message="Report sent to manager", summary=summary)
