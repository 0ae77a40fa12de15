from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..common.period import PayPeriod
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    """AttendanceRepository over an explicit snapshot of records."""

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_employee_date: dict[tuple[str, date], AttendanceRecord] = {}
        for r in records:
            k = (r.employee_number, r.work_date)
            if k in self._by_employee_date:
                raise ValidationError(f"duplicate attendance for {r.employee_number} on {r.work_date:%Y-%m-%d}")
            self._by_employee_date[k] = r

    def list_for_employee(self, employee_number: str, period: PayPeriod) -> Sequence[AttendanceRecord]:
        return [
            r
            for r in self.list_for_period(period)
            if r.employee_number == employee_number
        ]

    def list_for_period(self, period: PayPeriod) -> Sequence[AttendanceRecord]:
        items = [r for r in self._by_employee_date.values() if period.contains(r.work_date)]
        items.sort(key=lambda r: (r.employee_number, r.work_date))
        return items
