from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..common.money import round_half_up
from ..common.validators import require_non_negative_int
from ..core.constants import HOURS_PER_WORK_DAY, MINUTES_PER_HOUR
from ..core.enums import SalaryType
from ..employees.model import Employee
from .deductions.rates import parse_rate


class OvertimeCalculator(ABC):
    """Turns overtime minutes into overtime pay."""

    @abstractmethod
    def overtime_pay(self, employee: Employee, overtime_minutes: int) -> int:
        raise NotImplementedError


class NoOvertimeCalculator(OvertimeCalculator):
    """Overtime is not paid; used until real overtime rules are configured."""

    def overtime_pay(self, employee: Employee, overtime_minutes: int) -> int:
        return 0


class PremiumOvertimeCalculator(OvertimeCalculator):
    """Hourly-equivalent rate x premium rate x overtime hours.

    Non-hourly salaries are converted with a fixed 8-hour day.
    """

    def __init__(self, premium_rate):
        self._premium_rate = parse_rate(premium_rate, "overtime_premium_rate")

    def hourly_rate(self, employee: Employee) -> Decimal:
        if employee.salary_type == SalaryType.HOURLY:
            return Decimal(employee.base_salary)
        return Decimal(employee.base_salary) / HOURS_PER_WORK_DAY

    def overtime_pay(self, employee: Employee, overtime_minutes: int) -> int:
        require_non_negative_int(overtime_minutes, "overtime_minutes")
        hours = Decimal(overtime_minutes) / MINUTES_PER_HOUR
        return round_half_up(self.hourly_rate(employee) * self._premium_rate * hours)
