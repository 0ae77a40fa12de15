from __future__ import annotations

from abc import ABC, abstractmethod


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for base pay)."""

    @abstractmethod
    def base_pay(self, *, base_salary: int, work_days: int) -> int:
        raise NotImplementedError
