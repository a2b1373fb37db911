from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...core.enums import AttendanceStatus
from ..timekeeping import round_hours


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    hours_worked: Decimal


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a finished day is classified."""

    status: AttendanceStatus

    @abstractmethod
    def decide_checkout(self, *, minutes_worked: int) -> StatusDecision:
        raise NotImplementedError


class FixedStatusStrategy(AttendanceStrategy):
    def decide_checkout(self, *, minutes_worked: int) -> StatusDecision:
        return StatusDecision(status=self.status, hours_worked=round_hours(minutes_worked))
