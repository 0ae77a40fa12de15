from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterable, Sequence

from ..core.exceptions import ValidationError
from .statement import PayrollStatement

SUMMED_COLUMNS = (
    "work_days",
    "absence_days",
    "paid_leave_days",
    "base_pay",
    "transportation_allowance",
    "allowances_total",
    "overtime_pay",
    "gross_pay",
    "health_insurance",
    "nursing_insurance",
    "pension_insurance",
    "employment_insurance",
    "income_tax",
    "resident_tax",
    "deductions_total",
    "net_pay",
)


@dataclass(frozen=True)
class PeriodTotals:
    """Column-wise sums over a set of statements.

    `periods` and `employee_numbers` keep input order for display only.
    """

    periods: tuple[str, ...] = field(default_factory=tuple)
    employee_numbers: tuple[str, ...] = field(default_factory=tuple)
    work_days: int = 0
    absence_days: int = 0
    paid_leave_days: int = 0
    base_pay: int = 0
    transportation_allowance: int = 0
    allowances_total: int = 0
    overtime_pay: int = 0
    gross_pay: int = 0
    health_insurance: int = 0
    nursing_insurance: int = 0
    pension_insurance: int = 0
    employment_insurance: int = 0
    income_tax: int = 0
    resident_tax: int = 0
    deductions_total: int = 0
    net_pay: int = 0

    @property
    def insurance_total(self) -> int:
        return self.health_insurance + self.nursing_insurance + self.pension_insurance

    def sums(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in SUMMED_COLUMNS}

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["periods"] = list(self.periods)
        data["employee_numbers"] = list(self.employee_numbers)
        data["insurance_total"] = self.insurance_total
        return data


def _unique_in_order(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def _sum_columns(statements: Sequence[PayrollStatement]) -> PeriodTotals:
    totals = {name: sum(getattr(s, name) for s in statements) for name in SUMMED_COLUMNS}
    return PeriodTotals(
        periods=_unique_in_order(s.period.key for s in statements),
        employee_numbers=_unique_in_order(s.employee_number for s in statements),
        **totals,
    )


def aggregate_periods(statements: Iterable[PayrollStatement]) -> PeriodTotals:
    """Year-to-date / custom-range totals for one employee."""
    items = list(statements)
    if len({s.employee_number for s in items}) > 1:
        raise ValidationError("period totals require statements of a single employee")
    keys = [s.period.key for s in items]
    if len(set(keys)) != len(keys):
        raise ValidationError("period totals require distinct pay periods")
    return _sum_columns(items)


def aggregate_roster(statements: Iterable[PayrollStatement]) -> PeriodTotals:
    """Totals row of a monthly roster: one period, many employees."""
    items = list(statements)
    if len({s.period.key for s in items}) > 1:
        raise ValidationError("roster totals require statements of a single pay period")
    numbers = [s.employee_number for s in items]
    if len(set(numbers)) != len(numbers):
        raise ValidationError("roster totals require distinct employees")
    return _sum_columns(items)
