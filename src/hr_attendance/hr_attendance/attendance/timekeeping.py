"""Pure time accounting helpers.

Every function takes the zone explicitly. Instants are aware datetimes; the
zone only decides which calendar day an instant belongs to and how it is shown.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo

from ..core.constants import CLOCK_FORMAT, DATE_FORMAT, HALF_DAY_MIN_HOURS, HOURS_QUANTUM, PRESENT_MIN_HOURS
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidStoredLoginError
from .model import AttendanceRecord

_CLOCK_RE = re.compile(r"\d{2}:\d{2}:\d{2}")


def day_key(instant: datetime, zone: ZoneInfo) -> date:
    """Calendar day of ``instant`` in ``zone``."""
    return instant.astimezone(zone).date()


def format_clock(instant: datetime, zone: ZoneInfo) -> str:
    """Local wall-clock ``HH:MM:SS`` for display."""
    return instant.astimezone(zone).strftime(CLOCK_FORMAT)


def _parse_legacy_login(work_date: date, login_time: str, zone: ZoneInfo) -> datetime:
    if not isinstance(login_time, str) or not _CLOCK_RE.fullmatch(login_time):
        raise InvalidStoredLoginError()
    try:
        naive = datetime.strptime(
            f"{work_date.strftime(DATE_FORMAT)} {login_time}",
            f"{DATE_FORMAT} {CLOCK_FORMAT}",
        )
    except ValueError:
        raise InvalidStoredLoginError() from None
    return naive.replace(tzinfo=zone)


def resolve_login_instant(record: AttendanceRecord, zone: ZoneInfo) -> datetime:
    """Prefer ``login_at``; fall back to ``work_date`` + legacy ``HH:MM:SS`` in ``zone``."""
    if record.login_at is not None:
        if record.login_at.tzinfo is None:
            raise InvalidStoredLoginError()
        return record.login_at
    if not record.legacy_login_time:
        raise InvalidStoredLoginError()
    return _parse_legacy_login(record.work_date, record.legacy_login_time, zone)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``, floored. Negative when ``end`` is earlier."""
    return math.floor((end - start).total_seconds() / 60)


def hours_from_minutes(minutes: int) -> float:
    return minutes / 60


def round_hours(minutes: int) -> Decimal:
    """Two-decimal hours for storage and responses."""
    return (Decimal(minutes) / Decimal(60)).quantize(Decimal(HOURS_QUANTUM), rounding=ROUND_HALF_UP)


def classify_hours(hours: float) -> AttendanceStatus:
    if hours >= PRESENT_MIN_HOURS:
        return AttendanceStatus.PRESENT
    if hours >= HALF_DAY_MIN_HOURS:
        return AttendanceStatus.HALF_DAY
    return AttendanceStatus.ABSENT
