from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.hr_attendance.hr_attendance.attendance.model import AttendanceRecord
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus, Role
from src.hr_attendance.hr_attendance.core.exceptions import DuplicateRecordError
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.notifications.model import Notification


@dataclass
class InMemoryEmployees:
    employees_by_id: dict[int, Employee]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees_by_id.get(employee_id)


class InMemoryAttendance:
    """Honors the (employee_id, work_date) uniqueness the MySQL schema enforces."""

    def __init__(self):
        self._by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self.inserts = 0
        self.updates = 0

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self._by_key[(record.employee_id, record.work_date)] = record
        self._id = max(self._id, record.attendance_id)
        return record

    def all_records(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def create_checkin(self, *, employee_id: int, name: str, email: str, work_date: date, login_at: datetime) -> int:
        if (employee_id, work_date) in self._by_key:
            raise DuplicateRecordError("duplicate")
        self._id += 1
        self.inserts += 1
        self._by_key[(employee_id, work_date)] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            name=name,
            email=email,
            work_date=work_date,
            login_at=login_at,
        )
        return self._id

    def update_checkout(self, *, attendance_id: int, logout_at: datetime, hours_worked: Decimal, status: AttendanceStatus) -> bool:
        for k, v in list(self._by_key.items()):
            if v.attendance_id == attendance_id and not v.is_closed:
                self._by_key[k] = replace(v, logout_at=logout_at, hours_worked=hours_worked, status=status)
                self.updates += 1
                return True
        return False

    def list_for_employee(self, employee_id: int):
        items = [r for r in self._by_key.values() if r.employee_id == employee_id]
        return sorted(items, key=lambda r: r.work_date)

    def list_all(self):
        return sorted(self._by_key.values(), key=lambda r: r.work_date, reverse=True)


@dataclass
class InMemoryNotifications:
    items: list[Notification] = field(default_factory=list)

    def create(self, *, user_id: int, message: str, type: str, created_at: datetime) -> Notification:
        n = Notification(
            notification_id=len(self.items) + 1,
            user_id=user_id,
            message=message,
            type=type,
            created_at=created_at,
        )
        self.items.append(n)
        return n

    def list_for_user(self, user_id: int):
        mine = [n for n in self.items if n.user_id == user_id]
        return sorted(mine, key=lambda n: (n.created_at, n.notification_id), reverse=True)

    def mark_read(self, *, notification_id: int, user_id: int) -> bool:
        for i, n in enumerate(self.items):
            if n.notification_id == notification_id and n.user_id == user_id:
                self.items[i] = replace(n, is_read=True)
                return True
        return False


@pytest.fixture
def employees():
    return InMemoryEmployees(
        {
            1: Employee(employee_id=1, name="Asha Rao", email="asha.rao@example.com"),
            2: Employee(employee_id=2, name="Vikram Shah", email="vikram.shah@example.com"),
            9: Employee(employee_id=9, name="Admin Demo", email="admin@example.com", role=Role.ADMIN),
        }
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def notifications_repo():
    return InMemoryNotifications()


@pytest.fixture
def fixed_now():
    # 2026-02-02 09:00:00 in Asia/Kolkata
    return datetime(2026, 2, 2, 3, 30, 0, tzinfo=timezone.utc)
