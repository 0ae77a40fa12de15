from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .attendance.in_memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.model import AttendanceRecord
from .employees.in_memory_employee_repository import InMemoryEmployeeRepository
from .employees.model import Employee
from .payroll.deductions.calculator import DeductionCalculator
from .payroll.deductions.rates import PayrollRates
from .payroll.overtime import NoOvertimeCalculator, OvertimeCalculator, PremiumOvertimeCalculator
from .payroll.salary.factory import SalaryCalculatorFactory
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository

    rates: PayrollRates
    deduction_calculator: DeductionCalculator
    overtime_calculator: OvertimeCalculator

    payroll_service: PayrollService


def _overtime_from_settings(settings) -> OvertimeCalculator:
    premium: Optional[str] = getattr(settings, "OVERTIME_PREMIUM_RATE", None)
    if premium is None or not str(premium).strip():
        return NoOvertimeCalculator()
    return PremiumOvertimeCalculator(premium)


def build_container(
    settings,
    *,
    employees: Iterable[Employee] = (),
    attendance: Iterable[AttendanceRecord] = (),
) -> Container:
    """Wire repositories and calculators.

    Employee and attendance snapshots are handed in by the calling layer.
    """
    rates = PayrollRates.from_settings(settings)
    deduction_calculator = DeductionCalculator(rates)
    overtime_calculator = _overtime_from_settings(settings)

    employees_repo = InMemoryEmployeeRepository(employees)
    attendance_repo = InMemoryAttendanceRepository(attendance)

    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        deduction_calculator=deduction_calculator,
        salary_factory=SalaryCalculatorFactory(),
        overtime_calculator=overtime_calculator,
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        rates=rates,
        deduction_calculator=deduction_calculator,
        overtime_calculator=overtime_calculator,
        payroll_service=payroll_service,
    )
