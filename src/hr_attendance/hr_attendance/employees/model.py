from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Directory entry: the identity snapshot copied onto attendance records."""

    employee_id: int
    name: str
    email: str
    role: Role = Role.EMPLOYEE
    is_active: bool = True
