from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from ..attendance.model import AttendanceSummary
from ..common.period import PayPeriod
from ..common.validators import require_non_negative_int
from ..core.enums import SalaryType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .deductions.calculator import DeductionCalculator
from .overtime import NoOvertimeCalculator, OvertimeCalculator
from .salary.factory import SalaryCalculatorFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollStatement:
    """Itemized pay statement for one employee and one pay period.

    Net pay is allowed to be negative; that is a reportable outcome.
    """

    period: PayPeriod
    employee_id: str
    employee_number: str
    employee_name: str
    salary_type: Optional[SalaryType]
    work_days: int
    absence_days: int
    paid_leave_days: int
    base_pay: int
    transportation_allowance: int
    allowances_total: int
    overtime_pay: int
    gross_pay: int
    health_insurance: int
    nursing_insurance: int
    pension_insurance: int
    employment_insurance: int
    income_tax: int
    resident_tax: int
    deductions_total: int
    net_pay: int

    def __post_init__(self):
        expected_gross = self.base_pay + self.transportation_allowance + self.allowances_total + self.overtime_pay
        if self.gross_pay != expected_gross:
            raise ValidationError(f"gross pay {self.gross_pay} != sum of pay lines {expected_gross}")
        expected_deductions = (
            self.health_insurance
            + self.nursing_insurance
            + self.pension_insurance
            + self.employment_insurance
            + self.income_tax
            + self.resident_tax
        )
        if self.deductions_total != expected_deductions:
            raise ValidationError(f"deductions total {self.deductions_total} != sum of lines {expected_deductions}")
        if self.net_pay != self.gross_pay - self.deductions_total:
            raise ValidationError("net pay must equal gross pay minus deductions")

    @property
    def insurance_total(self) -> int:
        return self.health_insurance + self.nursing_insurance + self.pension_insurance

    def to_dict(self) -> dict:
        data = asdict(self)
        data["period"] = self.period.key
        data["salary_type"] = self.salary_type.value if self.salary_type else None
        data["insurance_total"] = self.insurance_total
        return data


def build_statement(
    employee: Employee,
    summary: AttendanceSummary,
    *,
    deduction_calculator: DeductionCalculator,
    salary_factory: Optional[SalaryCalculatorFactory] = None,
    overtime_calculator: Optional[OvertimeCalculator] = None,
) -> PayrollStatement:
    """Compose base pay, allowances, overtime and deductions into a statement.

    Pure: identical inputs always give an identical statement.
    """
    if summary.employee_number != employee.employee_number:
        raise ValidationError(
            f"attendance summary for {summary.employee_number} does not belong to employee {employee.employee_number}"
        )

    salary_calculator = (salary_factory or SalaryCalculatorFactory()).for_salary_type(employee.salary_type)
    base_pay = salary_calculator.base_pay(base_salary=employee.base_salary, work_days=summary.work_days)
    overtime_pay = (overtime_calculator or NoOvertimeCalculator()).overtime_pay(employee, summary.overtime_minutes)
    require_non_negative_int(overtime_pay, "overtime_pay")

    transportation = employee.transportation_allowance
    allowances_total = employee.allowances_total
    gross_pay = base_pay + transportation + allowances_total + overtime_pay

    deductions = deduction_calculator.calculate(employee, summary.period, gross_pay)

    logger.debug(
        "Built statement for %s %s: gross=%s deductions=%s",
        employee.employee_number,
        summary.period.key,
        gross_pay,
        deductions.total,
    )

    return PayrollStatement(
        period=summary.period,
        employee_id=employee.employee_id,
        employee_number=employee.employee_number,
        employee_name=employee.name,
        salary_type=employee.salary_type,
        work_days=summary.work_days,
        absence_days=summary.absence_days,
        paid_leave_days=summary.paid_leave_days,
        base_pay=base_pay,
        transportation_allowance=transportation,
        allowances_total=allowances_total,
        overtime_pay=overtime_pay,
        gross_pay=gross_pay,
        health_insurance=deductions.health_insurance,
        nursing_insurance=deductions.nursing_insurance,
        pension_insurance=deductions.pension_insurance,
        employment_insurance=deductions.employment_insurance,
        income_tax=deductions.income_tax,
        resident_tax=deductions.resident_tax,
        deductions_total=deductions.total,
        net_pay=gross_pay - deductions.total,
    )
