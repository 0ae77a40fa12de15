from dataclasses import replace

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceSummary
from src.payroll_system.payroll_system.common.period import PayPeriod
from src.payroll_system.payroll_system.core.enums import SalaryType
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.employees.model import Allowance, Employee, ResidentTax
from src.payroll_system.payroll_system.payroll.deductions.calculator import DeductionCalculator
from src.payroll_system.payroll_system.payroll.deductions.rates import PayrollRates
from src.payroll_system.payroll_system.payroll.overtime import PremiumOvertimeCalculator
from src.payroll_system.payroll_system.payroll.statement import build_statement


def _hourly_employee(**kwargs):
    values = dict(
        employee_id="1",
        employee_number="E001",
        name="Sato Hanako",
        salary_type=SalaryType.HOURLY,
        base_salary=1000,
        transportation_allowance=10000,
        allowances=(Allowance(name="Perfect attendance", amount=5000), Allowance(name="", amount=9999)),
        health_insurance=10000,
        nursing_insurance=2000,
        pension_insurance=18000,
        resident_tax=ResidentTax(june=12000, other=11000),
    )
    values.update(kwargs)
    return Employee(**values)


def _summary(period="2025-03", work_days=20, **kwargs):
    return AttendanceSummary(
        employee_number=kwargs.pop("employee_number", "E001"),
        period=PayPeriod.parse(period),
        work_days=work_days,
        absence_days=kwargs.pop("absence_days", 1),
        **kwargs,
    )


def _calculator():
    return DeductionCalculator(PayrollRates())


def test_statement_itemizes_pay_and_deductions():
    s = build_statement(_hourly_employee(), _summary(), deduction_calculator=_calculator())

    assert s.base_pay == 160000
    assert s.transportation_allowance == 10000
    assert s.allowances_total == 5000
    assert s.overtime_pay == 0
    assert s.gross_pay == 175000
    assert s.employment_insurance == 525
    assert s.income_tax == 8750
    assert s.resident_tax == 11000
    assert s.deductions_total == 50275
    assert s.net_pay == 124725
    assert s.absence_days == 1


def test_gross_and_net_invariants_hold():
    s = build_statement(_hourly_employee(), _summary(period="2025-06", work_days=7), deduction_calculator=_calculator())

    assert s.gross_pay == s.base_pay + s.transportation_allowance + s.allowances_total + s.overtime_pay
    assert s.net_pay == s.gross_pay - s.deductions_total


def test_negative_net_pay_is_reported_not_clamped():
    employee = _hourly_employee(salary_type=SalaryType.FIXED, base_salary=0, transportation_allowance=0, allowances=())

    s = build_statement(employee, _summary(work_days=0), deduction_calculator=_calculator())

    assert s.gross_pay == 0
    assert s.net_pay == -(10000 + 2000 + 18000 + 11000)


def test_overtime_seam_feeds_gross_pay():
    s = build_statement(
        _hourly_employee(),
        _summary(overtime_minutes=600),
        deduction_calculator=_calculator(),
        overtime_calculator=PremiumOvertimeCalculator("1.25"),
    )

    assert s.overtime_pay == 12500
    assert s.gross_pay == 175000 + 12500


def test_recomputing_is_bit_identical():
    first = build_statement(_hourly_employee(), _summary(), deduction_calculator=_calculator())
    second = build_statement(_hourly_employee(), _summary(), deduction_calculator=_calculator())

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_summary_of_other_employee_rejected():
    with pytest.raises(ValidationError):
        build_statement(_hourly_employee(), _summary(employee_number="E999"), deduction_calculator=_calculator())


def test_inconsistent_statement_rejected():
    s = build_statement(_hourly_employee(), _summary(), deduction_calculator=_calculator())

    with pytest.raises(ValidationError):
        replace(s, gross_pay=s.gross_pay + 1)
    with pytest.raises(ValidationError):
        replace(s, net_pay=s.net_pay + 1)


def test_to_dict_is_plain_data():
    data = build_statement(_hourly_employee(), _summary(), deduction_calculator=_calculator()).to_dict()

    assert data["period"] == "2025-03"
    assert data["salary_type"] == "hourly"
    assert data["insurance_total"] == 30000
    assert data["net_pay"] == 124725
