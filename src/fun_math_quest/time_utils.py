from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo


DEFAULT_TZ = "Europe/Oslo"


def now_local(tz_name: str = DEFAULT_TZ) -> datetime:
    return datetime.now(tz=ZoneInfo(tz_name))


def today_local(tz_name: str = DEFAULT_TZ) -> date:
    return now_local(tz_name).date()


def elapsed_seconds(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds())


def parse_iso_date(raw: object) -> date | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None
