from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One attendance entry per (employee, work_date).

    ``login_at``/``logout_at`` are aware UTC instants. ``legacy_login_time`` and
    ``legacy_logout_time`` are the ``HH:MM:SS`` strings older rows carry instead.
    """

    attendance_id: int
    employee_id: int
    name: str
    email: str
    work_date: date
    login_at: Optional[datetime]
    logout_at: Optional[datetime] = None
    hours_worked: Optional[Decimal] = None
    status: Optional[AttendanceStatus] = None
    legacy_login_time: Optional[str] = None
    legacy_logout_time: Optional[str] = None

    @property
    def is_closed(self) -> bool:
        return self.logout_at is not None or bool(self.legacy_logout_time)


class MarkResult(str, Enum):
    CREATED = "created"
    ALREADY_MARKED = "already_marked"
    COMPLETED = "completed"


@dataclass(frozen=True)
class MarkOutcome:
    result: MarkResult
    record: Optional[AttendanceRecord] = None

    @property
    def status(self) -> Optional[AttendanceStatus]:
        return self.record.status if self.record else None

    @property
    def hours_worked(self) -> Optional[Decimal]:
        return self.record.hours_worked if self.record else None
