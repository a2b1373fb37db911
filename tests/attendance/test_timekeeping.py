from datetime import date, datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from src.hr_attendance.hr_attendance.attendance.model import AttendanceRecord
from src.hr_attendance.hr_attendance.attendance.timekeeping import (
    classify_hours,
    day_key,
    format_clock,
    minutes_between,
    resolve_login_instant,
    round_hours,
)
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus
from src.hr_attendance.hr_attendance.core.exceptions import InvalidStoredLoginError

IST = ZoneInfo("Asia/Kolkata")


def _record(**overrides) -> AttendanceRecord:
    values = dict(
        attendance_id=1,
        employee_id=1,
        name="A",
        email="a@example.com",
        work_date=date(2026, 2, 2),
        login_at=None,
    )
    values.update(overrides)
    return AttendanceRecord(**values)


def test_day_key_uses_fixed_zone_not_utc():
    # 20:00 UTC on Feb 1 is already Feb 2 in India.
    instant = datetime(2026, 2, 1, 20, 0, tzinfo=timezone.utc)

    assert day_key(instant, IST) == date(2026, 2, 2)
    assert format_clock(instant, IST) == "01:30:00"


@pytest.mark.parametrize(
    "logout, expected",
    [
        (datetime(2026, 2, 2, 16, 30, 0, tzinfo=IST), AttendanceStatus.PRESENT),
        (datetime(2026, 2, 2, 16, 29, 59, tzinfo=IST), AttendanceStatus.HALF_DAY),
        (datetime(2026, 2, 2, 13, 0, 0, tzinfo=IST), AttendanceStatus.HALF_DAY),
        (datetime(2026, 2, 2, 12, 59, 59, tzinfo=IST), AttendanceStatus.ABSENT),
    ],
)
def test_classification_boundaries(logout, expected):
    login = datetime(2026, 2, 2, 9, 0, 0, tzinfo=IST)

    minutes = minutes_between(login, logout)

    assert classify_hours(minutes / 60) == expected


def test_minutes_are_floored_including_negative():
    login = datetime(2026, 2, 2, 9, 0, 0, tzinfo=IST)

    assert minutes_between(login, datetime(2026, 2, 2, 9, 0, 59, tzinfo=IST)) == 0
    assert minutes_between(login, datetime(2026, 2, 2, 8, 59, 30, tzinfo=IST)) == -1


def test_round_hours_two_decimals():
    assert round_hours(449) == Decimal("7.48")
    assert round_hours(450) == Decimal("7.50")
    assert round_hours(1) == Decimal("0.02")


def test_login_at_is_preferred_over_legacy_string():
    login_at = datetime(2026, 2, 2, 3, 30, tzinfo=timezone.utc)
    record = _record(login_at=login_at, legacy_login_time="11:11:11")

    assert resolve_login_instant(record, IST) == login_at


def test_legacy_reconstruction_matches_login_at():
    login_at = datetime(2026, 2, 2, 9, 0, 0, tzinfo=IST)
    logout = datetime(2026, 2, 2, 17, 15, 42, tzinfo=IST)
    modern = _record(login_at=login_at.astimezone(timezone.utc))
    legacy = _record(legacy_login_time="09:00:00")

    from_modern = resolve_login_instant(modern, IST)
    from_legacy = resolve_login_instant(legacy, IST)

    assert abs((from_modern - from_legacy).total_seconds()) < 1
    assert minutes_between(from_modern, logout) == minutes_between(from_legacy, logout)


@pytest.mark.parametrize(
    "value",
    [None, "", "9:00:00", "25:00:00", "09:00", "not-a-time", "09:00:00 PM", " 09:00:00 ", "09:00:00\n"],
)
def test_malformed_legacy_login_is_rejected(value):
    with pytest.raises(InvalidStoredLoginError):
        resolve_login_instant(_record(legacy_login_time=value), IST)


def test_naive_login_at_is_rejected():
    with pytest.raises(InvalidStoredLoginError):
        resolve_login_instant(_record(login_at=datetime(2026, 2, 2, 9, 0)), IST)
