import pytest

from src.payroll_system.payroll_system.core.enums import SalaryType
from src.payroll_system.payroll_system.core.exceptions import ConfigurationError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.payroll.overtime import NoOvertimeCalculator, PremiumOvertimeCalculator


def _employee(salary_type, base_salary):
    return Employee(employee_id="1", employee_number="E001", name="A", salary_type=salary_type, base_salary=base_salary)


def test_no_overtime_calculator_pays_nothing():
    assert NoOvertimeCalculator().overtime_pay(_employee(SalaryType.HOURLY, 1000), 600) == 0


def test_hourly_employee_uses_hourly_rate():
    calc = PremiumOvertimeCalculator("0.2")

    # 1000 x 0.2 x 15h
    assert calc.overtime_pay(_employee(SalaryType.HOURLY, 1000), 15 * 60) == 3000


def test_daily_rate_is_converted_with_eight_hour_day():
    calc = PremiumOvertimeCalculator("1.25")

    # 8000 / 8 = 1000 per hour, x 1.25 x 1.5h
    assert calc.overtime_pay(_employee(SalaryType.DAILY_MONTHLY, 8000), 90) == 1875


def test_partial_units_round_half_up():
    calc = PremiumOvertimeCalculator("1")

    # 1 per hour x 30 minutes = 0.5
    assert calc.overtime_pay(_employee(SalaryType.HOURLY, 1), 30) == 1


def test_invalid_premium_rate_rejected():
    with pytest.raises(ConfigurationError):
        PremiumOvertimeCalculator("")
