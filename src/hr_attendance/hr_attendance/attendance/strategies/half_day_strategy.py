from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import FixedStatusStrategy


class HalfDayStrategy(FixedStatusStrategy):
    """At least 4 hours, short of a full day."""

    status = AttendanceStatus.HALF_DAY
