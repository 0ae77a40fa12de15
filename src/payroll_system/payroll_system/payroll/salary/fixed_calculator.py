from __future__ import annotations

from .base import SalaryCalculator


class FixedSalaryCalculator(SalaryCalculator):
    """Monthly amount, independent of attendance."""

    def base_pay(self, *, base_salary: int, work_days: int) -> int:
        return base_salary
