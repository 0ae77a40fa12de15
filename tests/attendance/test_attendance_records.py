from datetime import date, datetime

import pytest

from src.payroll_system.payroll_system.attendance.in_memory_attendance_repository import InMemoryAttendanceRepository
from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.common.period import PayPeriod
from src.payroll_system.payroll_system.core.exceptions import ValidationError


def test_clock_out_before_clock_in_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord(
            record_id="1",
            employee_number="E001",
            work_date=date(2025, 3, 1),
            clock_in_time=datetime(2025, 3, 1, 18, 0),
            clock_out_time=datetime(2025, 3, 1, 9, 0),
        )


def test_clock_out_without_clock_in_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord(
            record_id="1",
            employee_number="E001",
            work_date=date(2025, 3, 1),
            clock_out_time=datetime(2025, 3, 1, 18, 0),
        )


def test_absence_record():
    r = AttendanceRecord(record_id="1", employee_number="E001", work_date=date(2025, 3, 1))

    assert r.is_absence
    assert not r.is_closed


def test_repository_rejects_second_record_for_same_day():
    r1 = AttendanceRecord(record_id="1", employee_number="E001", work_date=date(2025, 3, 1))
    r2 = AttendanceRecord(record_id="2", employee_number="E001", work_date=date(2025, 3, 1))

    with pytest.raises(ValidationError):
        InMemoryAttendanceRepository([r1, r2])


def test_repository_filters_by_employee_and_month():
    repo = InMemoryAttendanceRepository(
        [
            AttendanceRecord(record_id="1", employee_number="E001", work_date=date(2025, 3, 2)),
            AttendanceRecord(record_id="2", employee_number="E001", work_date=date(2025, 3, 1)),
            AttendanceRecord(record_id="3", employee_number="E002", work_date=date(2025, 3, 1)),
            AttendanceRecord(record_id="4", employee_number="E001", work_date=date(2025, 4, 1)),
        ]
    )

    rows = repo.list_for_employee("E001", PayPeriod.parse("2025-03"))

    assert [r.record_id for r in rows] == ["2", "1"]
    assert len(repo.list_for_period(PayPeriod.parse("2025-03"))) == 3


@pytest.mark.parametrize(
    "clock_in, clock_out",
    [("09:00", "18:00"), ("09:00", None), (datetime(2025, 3, 1, 9, 0), "18:00")],
)
def test_clock_times_must_be_datetimes(clock_in, clock_out):
    with pytest.raises(ValidationError):
        AttendanceRecord(
            record_id="1",
            employee_number="E001",
            work_date=date(2025, 3, 1),
            clock_in_time=clock_in,
            clock_out_time=clock_out,
        )
