from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import get_zone, now_utc
from ..core.constants import DATE_FORMAT, DEFAULT_ZONE
from ..core.exceptions import (
    DuplicateRecordError,
    EmployeeNotFoundError,
    InvalidStoredLoginError,
    RecordNotFoundError,
)
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, MarkOutcome, MarkResult
from .repository import AttendanceRepository
from .timekeeping import day_key, format_clock, minutes_between, resolve_login_instant

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark in / mark out once per day, and read attendance history.

    Day boundaries and legacy login reconstruction both use the single zone
    given at construction time.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        zone_name: str = DEFAULT_ZONE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._zone = get_zone(zone_name)

    def mark_in(self, employee_id: int, *, now: datetime | None = None) -> MarkOutcome:
        now = now or now_utc()
        work_date = day_key(now, self._zone)

        existing = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if existing:
            return MarkOutcome(MarkResult.ALREADY_MARKED, existing)

        employee = self._employees.find_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError()

        try:
            attendance_id = self._attendance.create_checkin(
                employee_id=employee_id,
                name=employee.name,
                email=employee.email,
                work_date=work_date,
                login_at=now,
            )
        except DuplicateRecordError:
            # Lost a race against a concurrent mark-in for the same day.
            logger.warning("Concurrent mark-in for employee %s on %s", employee_id, work_date)
            return MarkOutcome(
                MarkResult.ALREADY_MARKED,
                self._attendance.get_for_employee_and_date(employee_id, work_date),
            )

        record = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            name=employee.name,
            email=employee.email,
            work_date=work_date,
            login_at=now,
        )
        logger.info("Employee %s marked in on %s", employee_id, work_date)
        return MarkOutcome(MarkResult.CREATED, record)

    def mark_out(self, employee_id: int, *, now: datetime | None = None) -> MarkOutcome:
        now = now or now_utc()
        work_date = day_key(now, self._zone)

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise RecordNotFoundError()
        if record.is_closed:
            return MarkOutcome(MarkResult.ALREADY_MARKED, record)

        try:
            login_at = resolve_login_instant(record, self._zone)
        except InvalidStoredLoginError:
            logger.warning(
                "Invalid stored login for attendance %s (login_time=%r)",
                record.attendance_id,
                record.legacy_login_time,
            )
            raise

        minutes = minutes_between(login_at, now)
        if minutes < 0:
            logger.warning("Mark-out precedes login for attendance %s by %s min", record.attendance_id, -minutes)
        strategy = self._factory.for_checkout(minutes_worked=minutes)
        decision = strategy.decide_checkout(minutes_worked=minutes)

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            logout_at=now,
            hours_worked=decision.hours_worked,
            status=decision.status,
        )
        if not updated:
            logger.warning("Concurrent mark-out for attendance %s", record.attendance_id)
            return MarkOutcome(
                MarkResult.ALREADY_MARKED,
                self._attendance.get_for_employee_and_date(employee_id, work_date),
            )

        closed = AttendanceRecord(
            attendance_id=record.attendance_id,
            employee_id=record.employee_id,
            name=record.name,
            email=record.email,
            work_date=record.work_date,
            login_at=record.login_at,
            logout_at=now,
            hours_worked=decision.hours_worked,
            status=decision.status,
            legacy_login_time=record.legacy_login_time,
        )
        logger.info(
            "Employee %s marked out on %s: %s h, %s",
            employee_id,
            work_date,
            decision.hours_worked,
            decision.status.value,
        )
        return MarkOutcome(MarkResult.COMPLETED, closed)

    def list_mine(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(employee_id)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def to_payload(self, r: AttendanceRecord) -> dict:
        """JSON shape of a record; clock strings are derived from the instants."""
        if r.login_at is not None:
            login_time = format_clock(r.login_at, self._zone)
        else:
            login_time = r.legacy_login_time
        if r.logout_at is not None:
            logout_time = format_clock(r.logout_at, self._zone)
        else:
            logout_time = r.legacy_logout_time

        return {
            "id": r.attendance_id,
            "employee": r.employee_id,
            "name": r.name,
            "email": r.email,
            "date": r.work_date.strftime(DATE_FORMAT),
            "loginTime": login_time,
            "loginAt": r.login_at.isoformat() if r.login_at else None,
            "logoutTime": logout_time,
            "logoutAt": r.logout_at.isoformat() if r.logout_at else None,
            "hoursWorked": format_hours(r.hours_worked),
            "status": r.status.value if r.status else None,
        }


def format_hours(hours: Optional[Decimal]) -> Optional[str]:
    return f"{hours:.2f}" if hours is not None else None
