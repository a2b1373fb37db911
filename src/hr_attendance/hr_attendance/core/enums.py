from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles carried by the authenticated identity."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Day classification stored once the employee marks out."""

    PRESENT = "Present"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"


class NegativeDurationPolicy(str, Enum):
    """What to do when mark-out happens before the stored login instant."""

    CLASSIFY_ABSENT = "absent"
    REJECT = "reject"
