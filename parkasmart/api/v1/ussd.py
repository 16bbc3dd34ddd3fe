"""USSD gateway callback (Africa's Talking style form post)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import PlainTextResponse

from parkasmart.api.deps import ClockDep, Receipts, Session
from parkasmart.services.ussd import handle_ussd

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ussd", tags=["ussd"])


@router.post("", response_class=PlainTextResponse)
async def ussd_callback(
    session: Session,
    clock: ClockDep,
    receipts: Receipts,
    session_id: Annotated[str, Form(alias="sessionId")] = "",
    phone_number: Annotated[str, Form(alias="phoneNumber")] = "",
    text: Annotated[str, Form()] = "",
) -> PlainTextResponse:
    """Reply text starts with ``CON`` (continue) or ``END`` (terminate)."""
    logger.info("USSD session %s from %s at %r", session_id, phone_number, text)
    reply = await handle_ussd(session, text, phone_number, clock, receipts)
    return PlainTextResponse(reply)
