from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import from_db_datetime, to_db_datetime
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_duplicate_key
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, name, email, work_date,
    login_at, login_time, logout_at, logout_time, hours_worked, status
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    hours = r.get("hours_worked")
    status = r.get("status")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        name=r["name"],
        email=r["email"],
        work_date=r["work_date"],
        login_at=from_db_datetime(r.get("login_at")),
        logout_at=from_db_datetime(r.get("logout_at")),
        hours_worked=Decimal(str(hours)) if hours is not None else None,
        status=AttendanceStatus(status) if status else None,
        legacy_login_time=r.get("login_time"),
        legacy_logout_time=r.get("logout_time"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_checkin(
        self,
        *,
        employee_id: int,
        name: str,
        email: str,
        work_date: date,
        login_at: datetime,
    ) -> int:
        with translate_duplicate_key(f"Attendance already exists for {employee_id} on {work_date}"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, name, email, work_date, login_at)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (employee_id, name, email, work_date, to_db_datetime(login_at)),
                )
                return int(cur.lastrowid)

    def update_checkout(
        self,
        *,
        attendance_id: int,
        logout_at: datetime,
        hours_worked: Decimal,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET logout_at=%s, hours_worked=%s, status=%s
                WHERE attendance_id=%s AND logout_at IS NULL AND logout_time IS NULL
                """,
                (to_db_datetime(logout_at), hours_worked, status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY work_date ASC
                """,
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                ORDER BY work_date DESC, attendance_id DESC
                """
            )
            return [_to_record(r) for r in fetchall(cur)]
