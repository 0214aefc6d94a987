# backend/famapp/utils/time_utils.py

from datetime import date, datetime
from typing import Optional

import pytz

from famapp.core.config_loader import settings


def local_today(tz_name: Optional[str] = None) -> date:
    """Today's date in the configured timezone (UTC by default)."""
    tz = pytz.timezone(tz_name or settings.timezone)
    return datetime.now(tz).date()


def days_until(start_date: date, today: Optional[date] = None) -> int:
    """
    Whole days from today to the trip start.
    Past start dates count as 0 (the trip is happening now).
    """
    today = today or local_today()
    return max(0, (start_date - today).days)
