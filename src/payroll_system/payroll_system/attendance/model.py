from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.period import PayPeriod
from ..common.validators import require_non_empty, require_optional_datetime
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance entry for one date.

    A missing clock-in means an absence was recorded for the date; a missing
    clock-out means the day is not closed yet.
    """

    record_id: str
    employee_number: str
    work_date: date
    clock_in_time: Optional[datetime] = None
    clock_out_time: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "employee_number", require_non_empty(self.employee_number, "employee number"))
        if not isinstance(self.work_date, date):
            raise ValidationError(f"work_date must be a date, got {self.work_date!r}")
        require_optional_datetime(self.clock_in_time, "clock_in_time")
        require_optional_datetime(self.clock_out_time, "clock_out_time")
        if self.clock_out_time is not None:
            if self.clock_in_time is None:
                raise ValidationError("clock-out recorded without clock-in")
            if self.clock_out_time <= self.clock_in_time:
                raise ValidationError("clock-out must be after clock-in")

    @property
    def is_absence(self) -> bool:
        return self.clock_in_time is None

    @property
    def is_closed(self) -> bool:
        return self.clock_in_time is not None and self.clock_out_time is not None


@dataclass(frozen=True)
class AttendanceSummary:
    """Per-period attendance figures for one employee."""

    employee_number: str
    period: PayPeriod
    work_days: int
    absence_days: int
    paid_leave_days: int = 0
    overtime_minutes: int = 0
    worked_minutes: int = 0
