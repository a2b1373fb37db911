from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus, NegativeDurationPolicy
from ..core.exceptions import ClockSkewError
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.present_strategy import PresentStrategy
from .timekeeping import classify_hours, hours_from_minutes


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the classification strategy for a finished day."""

    negative_policy: NegativeDurationPolicy = NegativeDurationPolicy.CLASSIFY_ABSENT

    def for_checkout(self, *, minutes_worked: int) -> AttendanceStrategy:
        if minutes_worked < 0 and self.negative_policy == NegativeDurationPolicy.REJECT:
            raise ClockSkewError()

        status = classify_hours(hours_from_minutes(minutes_worked))
        if status == AttendanceStatus.PRESENT:
            return PresentStrategy()
        if status == AttendanceStatus.HALF_DAY:
            return HalfDayStrategy()
        return AbsentStrategy()
