from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import FixedStatusStrategy


class PresentStrategy(FixedStatusStrategy):
    """Full day: at least 7.5 hours."""

    status = AttendanceStatus.PRESENT
