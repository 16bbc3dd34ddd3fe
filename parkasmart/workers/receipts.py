"""Receipt worker task — delivers one customer SMS."""

import logging

from parkasmart.core.config import get_settings
from parkasmart.core.errors import DeliveryError
from parkasmart.services.sms import build_sms_sink

logger = logging.getLogger(__name__)


async def send_receipt(ctx: dict, phone: str, message: str, reference_code: str) -> dict:
    """ARQ task: send a receipt SMS. Failures are logged, not retried.

    Args:
        ctx: ARQ worker context; ``ctx["sms"]`` overrides the configured sink.
        phone: Recipient number.
        message: Pre-formatted receipt text.
        reference_code: Entry reference, for logging.
    """
    sink = ctx.get("sms") or build_sms_sink(get_settings())
    try:
        await sink.send([phone], message)
    except DeliveryError as exc:
        logger.warning("Receipt %s to %s not delivered: %s", reference_code, phone, exc.message)
        return {"delivered": False, "error": exc.message}
    logger.info("Receipt %s delivered to %s", reference_code, phone)
    return {"delivered": True}
