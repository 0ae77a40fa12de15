from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...common.money import apply_rate
from ...employees.model import Employee
from .rates import parse_rate


class IncomeTaxCalculator(ABC):
    """Withholding interface. A table-based version can replace the flat rate."""

    @abstractmethod
    def calculate(self, gross_pay: int, employee: Employee) -> int:
        raise NotImplementedError


class FlatRateIncomeTaxCalculator(IncomeTaxCalculator):
    """Simplified withholding: gross pay x flat rate, dependents ignored."""

    def __init__(self, rate: Decimal):
        self._rate = parse_rate(rate, "income_tax_rate")

    @property
    def rate(self) -> Decimal:
        return self._rate

    def calculate(self, gross_pay: int, employee: Employee) -> int:
        return apply_rate(gross_pay, self._rate)
