"""
utils/time_utils.py

Purpose: Timestamp helpers

- Timezone-aware "now" for createdAt/updatedAt fields
- Display formatting for order dates
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

# India Standard Time, no DST
STORE_TIMEZONE = timezone(timedelta(hours=5, minutes=30), "IST")


def utcnow() -> datetime:
    """
    Current time in UTC. Mongo stores millisecond precision, so the
    microseconds are truncated to keep round-tripped values comparable.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_order_date(dt: Optional[datetime]) -> str:
    """
    Formats an order timestamp for display in the store's timezone,
    e.g. "18 Oct 2026, 3:05 pm".
    """
    if not dt:
        return "N/A"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    local = dt.astimezone(STORE_TIMEZONE)
    hour = local.hour % 12 or 12
    suffix = "am" if local.hour < 12 else "pm"
    return f"{local.day} {local.strftime('%b %Y')}, {hour}:{local.minute:02d} {suffix}"
