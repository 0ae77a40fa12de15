from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...common.money import apply_rate
from ...common.period import PayPeriod
from ...common.validators import require_non_negative_int
from ...core.exceptions import ConfigurationError
from ...employees.model import Employee
from .income_tax import FlatRateIncomeTaxCalculator, IncomeTaxCalculator
from .rates import PayrollRates


@dataclass(frozen=True)
class Deductions:
    health_insurance: int
    nursing_insurance: int
    pension_insurance: int
    employment_insurance: int
    income_tax: int
    resident_tax: int

    @property
    def insurance_total(self) -> int:
        """Social insurance premiums (health + nursing + pension)."""
        return self.health_insurance + self.nursing_insurance + self.pension_insurance

    @property
    def total(self) -> int:
        return self.insurance_total + self.employment_insurance + self.income_tax + self.resident_tax


class DeductionCalculator:
    """Statutory deductions for one employee and one pay period.

    Insurance premiums are pre-computed amounts on the employee record.
    Percentage lines are rounded half-up to whole currency units.
    """

    def __init__(self, rates: Optional[PayrollRates], *, income_tax_calculator: Optional[IncomeTaxCalculator] = None):
        if rates is None:
            raise ConfigurationError("payroll rates are required to compute deductions")
        self._rates = rates
        self._income_tax = income_tax_calculator or FlatRateIncomeTaxCalculator(rates.income_tax_rate)

    @property
    def rates(self) -> PayrollRates:
        return self._rates

    def employment_insurance(self, gross_pay: int) -> int:
        return apply_rate(gross_pay, self._rates.employment_insurance_rate)

    @staticmethod
    def resident_tax(employee: Employee, period: PayPeriod) -> int:
        # The June amount applies to June of any year; other months share one amount.
        return employee.resident_tax.june if period.is_june else employee.resident_tax.other

    def calculate(self, employee: Employee, period, gross_pay: int) -> Deductions:
        period = PayPeriod.parse(period)
        require_non_negative_int(gross_pay, "gross_pay")
        return Deductions(
            health_insurance=employee.health_insurance,
            nursing_insurance=employee.nursing_insurance,
            pension_insurance=employee.pension_insurance,
            employment_insurance=self.employment_insurance(gross_pay),
            income_tax=require_non_negative_int(self._income_tax.calculate(gross_pay, employee), "income_tax"),
            resident_tax=self.resident_tax(employee, period),
        )
