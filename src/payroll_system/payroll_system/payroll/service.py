from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..attendance.aggregator import aggregate_attendance
from ..attendance.repository import AttendanceRepository
from ..common.period import PayPeriod
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .aggregate import PeriodTotals, aggregate_periods, aggregate_roster
from .deductions.calculator import DeductionCalculator
from .overtime import OvertimeCalculator
from .salary.factory import SalaryCalculatorFactory
from .statement import PayrollStatement, build_statement


@dataclass(frozen=True)
class RosterReport:
    period: PayPeriod
    statements: list[PayrollStatement]
    totals: PeriodTotals


@dataclass(frozen=True)
class YearlyReport:
    year: int
    employee: Employee
    statements: list[PayrollStatement]
    totals: PeriodTotals


class PayrollService:
    """Use case: payroll statements from employee and attendance snapshots."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        deduction_calculator: DeductionCalculator,
        salary_factory: Optional[SalaryCalculatorFactory] = None,
        overtime_calculator: Optional[OvertimeCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._deductions = deduction_calculator
        self._salary_factory = salary_factory or SalaryCalculatorFactory()
        self._overtime = overtime_calculator

    def _statement(
        self,
        employee: Employee,
        period: PayPeriod,
        *,
        paid_leave_days: int = 0,
        overtime_minutes: int = 0,
    ) -> PayrollStatement:
        records = self._attendance.list_for_employee(employee.employee_number, period)
        summary = aggregate_attendance(
            employee.employee_number,
            period,
            records,
            paid_leave_days=paid_leave_days,
            overtime_minutes=overtime_minutes,
        )
        return build_statement(
            employee,
            summary,
            deduction_calculator=self._deductions,
            salary_factory=self._salary_factory,
            overtime_calculator=self._overtime,
        )

    def statement_for(
        self,
        employee_id: str,
        period,
        *,
        paid_leave_days: int = 0,
        overtime_minutes: int = 0,
    ) -> Optional[PayrollStatement]:
        period = PayPeriod.parse(period)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return None
        return self._statement(employee, period, paid_leave_days=paid_leave_days, overtime_minutes=overtime_minutes)

    def statement_for_number(
        self,
        employee_number: str,
        period,
        *,
        paid_leave_days: int = 0,
        overtime_minutes: int = 0,
    ) -> Optional[PayrollStatement]:
        period = PayPeriod.parse(period)
        employee = self._employees.get_by_employee_number(employee_number)
        if not employee:
            return None
        return self._statement(employee, period, paid_leave_days=paid_leave_days, overtime_minutes=overtime_minutes)

    def monthly_roster(
        self,
        period,
        *,
        paid_leave: Optional[Mapping[str, int]] = None,
        overtime: Optional[Mapping[str, int]] = None,
    ) -> RosterReport:
        """Statements of every employee for one period.

        `paid_leave` / `overtime` map employee numbers to days / minutes.
        """
        period = PayPeriod.parse(period)
        paid_leave = paid_leave or {}
        overtime = overtime or {}

        employees = sorted(self._employees.list_all(), key=lambda e: e.employee_number)
        statements = [
            self._statement(
                e,
                period,
                paid_leave_days=paid_leave.get(e.employee_number, 0),
                overtime_minutes=overtime.get(e.employee_number, 0),
            )
            for e in employees
        ]
        return RosterReport(period=period, statements=statements, totals=aggregate_roster(statements))

    def yearly_report(self, employee_id: str, year: int) -> Optional[YearlyReport]:
        """January to December statements of one employee plus year totals."""
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return None
        statements = [self._statement(employee, p) for p in PayPeriod.months_of(year)]
        return YearlyReport(year=int(year), employee=employee, statements=statements, totals=aggregate_periods(statements))
