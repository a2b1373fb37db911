from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import FixedStatusStrategy


class AbsentStrategy(FixedStatusStrategy):
    """Under 4 hours, including negative durations when they are tolerated."""

    status = AttendanceStatus.ABSENT
