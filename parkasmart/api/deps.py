"""FastAPI dependencies shared by the v1 routes."""

from typing import Annotated

from fastapi import BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from parkasmart.core.clock import Clock, get_clock
from parkasmart.core.config import Settings, get_settings
from parkasmart.core.database import get_session
from parkasmart.services.entries import ReceiptDispatcher
from parkasmart.services.receipts import Receipt, enqueue_receipt
from parkasmart.services.sms import SmsSink, get_sms_sink


def get_receipt_dispatcher(background_tasks: BackgroundTasks) -> ReceiptDispatcher:
    """Receipts are enqueued after the response has been sent."""

    def dispatch(receipt: Receipt) -> None:
        background_tasks.add_task(enqueue_receipt, receipt)

    return dispatch


# Typed shorthand for use in route signatures
Session = Annotated[AsyncSession, Depends(get_session)]
ClockDep = Annotated[Clock, Depends(get_clock)]
SmsDep = Annotated[SmsSink, Depends(get_sms_sink)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
Receipts = Annotated[ReceiptDispatcher, Depends(get_receipt_dispatcher)]
