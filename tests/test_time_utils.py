from datetime import date, datetime
from zoneinfo import ZoneInfo

from fun_math_quest.time_utils import elapsed_seconds, now_local, parse_iso_date, today_local


def test_elapsed_seconds_truncates() -> None:
    start = datetime(2026, 2, 4, 10, 0, 0, tzinfo=ZoneInfo("Europe/Oslo"))
    end = datetime(2026, 2, 4, 10, 1, 5, 900000, tzinfo=ZoneInfo("Europe/Oslo"))
    assert elapsed_seconds(start, end) == 65


def test_parse_iso_date() -> None:
    assert parse_iso_date("2026-03-10") == date(2026, 3, 10)
    assert parse_iso_date("2026-03-10T23:15:00+02:00") == date(2026, 3, 10)
    assert parse_iso_date("yesterday") is None
    assert parse_iso_date(20260310) is None
    assert parse_iso_date(None) is None


def test_now_local_is_aware() -> None:
    assert now_local("UTC").tzinfo is not None


def test_today_local_follows_timezone() -> None:
    assert today_local("UTC") == now_local("UTC").date()
