from __future__ import annotations

from typing import Protocol, Sequence

from ..common.period import PayPeriod
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_number: str, period: PayPeriod) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_period(self, period: PayPeriod) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
