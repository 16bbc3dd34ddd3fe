"""SMS delivery through the Africa's Talking messaging API."""

import logging
from typing import Protocol

import httpx

from parkasmart.core.config import Settings, get_settings
from parkasmart.core.errors import DeliveryError

logger = logging.getLogger(__name__)

SANDBOX_URL = "https://api.sandbox.africastalking.com/version1/messaging"
LIVE_URL = "https://api.africastalking.com/version1/messaging"


class SmsSink(Protocol):
    async def send(self, recipients: list[str], message: str) -> None:
        """Deliver ``message``; raise DeliveryError when it was not accepted."""
        ...


class AfricasTalkingSms:
    """Posts bulk SMS requests. One instance per settings object."""

    def __init__(
        self,
        username: str,
        api_key: str,
        sender_id: str = "",
        timeout: float = 10,
    ) -> None:
        self.username = username
        self.api_key = api_key
        self.sender_id = sender_id
        self.timeout = timeout

    @property
    def url(self) -> str:
        return SANDBOX_URL if self.username == "sandbox" else LIVE_URL

    async def send(self, recipients: list[str], message: str) -> None:
        form = {
            "username": self.username,
            "to": ",".join(recipients),
            "message": message,
        }
        if self.sender_id:
            form["from"] = self.sender_id

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(
                    self.url,
                    data=form,
                    headers={"apiKey": self.api_key, "Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            raise DeliveryError(f"SMS gateway unreachable: {exc}") from exc

        if resp.status_code >= 400:
            raise DeliveryError(f"SMS gateway returned HTTP {resp.status_code}")

        try:
            recipients_status = resp.json()["SMSMessageData"]["Recipients"]
        except (ValueError, KeyError, TypeError) as exc:
            raise DeliveryError("Unexpected SMS gateway response") from exc

        accepted = [r for r in recipients_status if r.get("status") == "Success"]
        if not accepted:
            raise DeliveryError("SMS was not accepted for any recipient")
        logger.info("SMS accepted for %d/%d recipients", len(accepted), len(recipients))


def build_sms_sink(settings: Settings) -> AfricasTalkingSms:
    return AfricasTalkingSms(
        username=settings.at_username,
        api_key=settings.at_api_key,
        sender_id=settings.at_sender_id,
    )


def get_sms_sink() -> SmsSink:
    """FastAPI dependency; tests override it with a recording fake."""
    return build_sms_sink(get_settings())
