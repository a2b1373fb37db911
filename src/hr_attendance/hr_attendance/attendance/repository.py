from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Clock Store: at most one record per (employee_id, work_date).

    ``create_checkin`` must raise DuplicateRecordError when the uniqueness
    constraint rejects the insert. ``update_checkout`` only touches open records
    and returns False when nothing was updated.
    """

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        employee_id: int,
        name: str,
        email: str,
        work_date: date,
        login_at: datetime,
    ) -> int:
        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        logout_at: datetime,
        hours_worked: Decimal,
        status: AttendanceStatus,
    ) -> bool:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        """Caller's records, oldest work_date first."""
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        """Every record, newest work_date first."""
        raise NotImplementedError
