from __future__ import annotations

from ...core.constants import HOURS_PER_WORK_DAY
from .base import SalaryCalculator


class HourlySalaryCalculator(SalaryCalculator):
    """Hourly rate x fixed 8-hour day x work days.

    Hours are not taken from clock-in/out deltas.
    """

    def base_pay(self, *, base_salary: int, work_days: int) -> int:
        return base_salary * HOURS_PER_WORK_DAY * work_days
