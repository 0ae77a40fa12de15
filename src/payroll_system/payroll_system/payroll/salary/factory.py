from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ...common.validators import require_non_negative_int
from ...core.enums import SalaryType
from .base import SalaryCalculator
from .daily_monthly_calculator import DailyMonthlySalaryCalculator
from .fixed_calculator import FixedSalaryCalculator
from .hourly_calculator import HourlySalaryCalculator

logger = logging.getLogger(__name__)


@dataclass
class SalaryCalculatorFactory:
    """Factory Pattern: choose the base-pay strategy for a salary type."""

    def for_salary_type(self, salary_type: Optional[SalaryType]) -> SalaryCalculator:
        if salary_type == SalaryType.HOURLY:
            return HourlySalaryCalculator()
        if salary_type == SalaryType.FIXED:
            return FixedSalaryCalculator()
        if salary_type != SalaryType.DAILY_MONTHLY:
            logger.warning("Unknown salary type %r, using the daily-monthly formula", salary_type)
        return DailyMonthlySalaryCalculator()


def calculate_base_pay(salary_type, base_salary: int, work_days: int, *, factory: Optional[SalaryCalculatorFactory] = None) -> int:
    require_non_negative_int(base_salary, "base_salary")
    require_non_negative_int(work_days, "work_days")
    calculator = (factory or SalaryCalculatorFactory()).for_salary_type(SalaryType.parse(salary_type))
    return calculator.base_pay(base_salary=base_salary, work_days=work_days)
