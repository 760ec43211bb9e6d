from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from app.config import settings


def today_in(tz_name: str | None = None, now: datetime | None = None) -> date:
    """Calendar date of `now` (default: current instant) in the given zone."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(ZoneInfo(tz_name or settings.timezone)).date()


def days_between(start: date, target: date) -> int:
    return (target - start).days
