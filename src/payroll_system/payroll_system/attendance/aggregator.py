from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import minutes_between
from ..common.period import PayPeriod
from ..common.validators import require_non_negative_int
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, AttendanceSummary


def aggregate_attendance(
    employee_number: str,
    period,
    records: Iterable[AttendanceRecord],
    *,
    paid_leave_days: int = 0,
    overtime_minutes: int = 0,
) -> AttendanceSummary:
    """Reduce raw attendance records into per-period counts for one employee.

    A day counts as worked as soon as a clock-in exists, even if the day is
    not closed. Dates without any record count neither as work nor absence.
    Paid leave and overtime have no signal in attendance data, so callers
    pass them in.
    """
    period = PayPeriod.parse(period)
    require_non_negative_int(paid_leave_days, "paid_leave_days")
    require_non_negative_int(overtime_minutes, "overtime_minutes")

    seen: set[date] = set()
    work_days = 0
    absence_days = 0
    worked_minutes = 0

    for r in records:
        if r.employee_number != employee_number or not period.contains(r.work_date):
            continue
        if r.work_date in seen:
            raise ValidationError(f"more than one attendance record for {employee_number} on {r.work_date:%Y-%m-%d}")
        seen.add(r.work_date)

        if r.is_absence:
            absence_days += 1
            continue
        work_days += 1
        if r.is_closed:
            worked_minutes += minutes_between(r.clock_in_time, r.clock_out_time)

    return AttendanceSummary(
        employee_number=employee_number,
        period=period,
        work_days=work_days,
        absence_days=absence_days,
        paid_leave_days=paid_leave_days,
        overtime_minutes=overtime_minutes,
        worked_minutes=worked_minutes,
    )
