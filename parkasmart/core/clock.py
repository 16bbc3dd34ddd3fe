"""Time source that decides what "today" means for the parking desk."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from parkasmart.core.config import get_settings


class Clock:
    """Wall-clock time in the site's local timezone."""

    def __init__(self, tz: str) -> None:
        self.tz = ZoneInfo(tz)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()

    def timestamp(self) -> str:
        """ISO-8601 entry timestamp; its first 10 chars are the local date."""
        return self.now().isoformat(timespec="milliseconds")


def get_clock() -> Clock:
    """FastAPI dependency; tests override it with a fixed clock."""
    return Clock(get_settings().timezone)
