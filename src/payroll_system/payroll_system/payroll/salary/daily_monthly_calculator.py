from __future__ import annotations

from .base import SalaryCalculator


class DailyMonthlySalaryCalculator(SalaryCalculator):
    """Daily rate x work days."""

    def base_pay(self, *, base_salary: int, work_days: int) -> int:
        return base_salary * work_days
