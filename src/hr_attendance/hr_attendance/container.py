from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ZONE
from .core.enums import NegativeDurationPolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.registry import SessionRegistry
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationRelay


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    notifications_repo: NotificationRepository
    session_registry: SessionRegistry

    attendance_service: AttendanceService
    notification_relay: NotificationRelay


def assemble_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    notifications_repo: NotificationRepository,
    conn: Optional[DatabaseConnection] = None,
    zone_name: str = DEFAULT_ZONE,
    negative_policy: NegativeDurationPolicy = NegativeDurationPolicy.CLASSIFY_ABSENT,
) -> Container:
    """Wire services over any repository implementations."""
    session_registry = SessionRegistry()
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        strategy_factory=AttendanceStrategyFactory(negative_policy=negative_policy),
        zone_name=zone_name,
    )
    notification_relay = NotificationRelay(notifications_repo, session_registry)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        notifications_repo=notifications_repo,
        session_registry=session_registry,
        attendance_service=attendance_service,
        notification_relay=notification_relay,
    )


def build_container(
    *,
    db_config: dict,
    zone_name: str = DEFAULT_ZONE,
    negative_policy: NegativeDurationPolicy = NegativeDurationPolicy.CLASSIFY_ABSENT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return assemble_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        conn=conn,
        zone_name=zone_name,
        negative_policy=negative_policy,
    )
