from datetime import date, datetime

import pytest

from src.payroll_system.payroll_system.attendance.aggregator import aggregate_attendance
from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.exceptions import ValidationError


def _rec(rid, number, day, clock_in=None, clock_out=None):
    work_date = date.fromisoformat(day)
    cin = datetime.combine(work_date, datetime.strptime(clock_in, "%H:%M").time()) if clock_in else None
    cout = datetime.combine(work_date, datetime.strptime(clock_out, "%H:%M").time()) if clock_out else None
    return AttendanceRecord(record_id=rid, employee_number=number, work_date=work_date, clock_in_time=cin, clock_out_time=cout)


def test_one_work_day_and_one_absence():
    records = [
        _rec("1", "E001", "2025-03-01", "09:00", "18:00"),
        _rec("2", "E001", "2025-03-02"),
    ]

    summary = aggregate_attendance("E001", "2025-03", records)

    assert summary.work_days == 1
    assert summary.absence_days == 1
    assert summary.paid_leave_days == 0
    assert summary.period.key == "2025-03"


def test_clock_in_without_clock_out_still_counts_as_work_day():
    records = [_rec("1", "E001", "2025-03-03", "09:00")]

    summary = aggregate_attendance("E001", "2025-03", records)

    assert summary.work_days == 1
    assert summary.worked_minutes == 0


def test_filters_other_employees_and_other_months():
    records = [
        _rec("1", "E001", "2025-03-01", "09:00", "18:00"),
        _rec("2", "E002", "2025-03-01", "09:00", "18:00"),
        _rec("3", "E001", "2025-04-01", "09:00", "18:00"),
        _rec("4", "E001", "2024-03-05", "09:00", "18:00"),
    ]

    summary = aggregate_attendance("E001", "2025-03", records)

    assert summary.work_days == 1
    assert summary.absence_days == 0


def test_no_records_means_zero_counts():
    summary = aggregate_attendance("E001", "2025-03", [])

    assert (summary.work_days, summary.absence_days) == (0, 0)


def test_worked_minutes_sums_closed_days():
    records = [
        _rec("1", "E001", "2025-03-01", "09:00", "18:00"),
        _rec("2", "E001", "2025-03-02", "09:00", "12:30"),
    ]

    summary = aggregate_attendance("E001", "2025-03", records)

    assert summary.worked_minutes == 9 * 60 + 3 * 60 + 30


def test_paid_leave_and_overtime_are_passed_through():
    summary = aggregate_attendance("E001", "2025-03", [], paid_leave_days=2, overtime_minutes=90)

    assert summary.paid_leave_days == 2
    assert summary.overtime_minutes == 90


def test_negative_paid_leave_rejected():
    with pytest.raises(ValidationError):
        aggregate_attendance("E001", "2025-03", [], paid_leave_days=-1)


def test_duplicate_date_rejected():
    records = [
        _rec("1", "E001", "2025-03-01", "09:00", "18:00"),
        _rec("2", "E001", "2025-03-01"),
    ]

    with pytest.raises(ValidationError):
        aggregate_attendance("E001", "2025-03", records)


def test_malformed_period_rejected():
    with pytest.raises(ValidationError):
        aggregate_attendance("E001", "2025-3", [])
