from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import require_non_empty, require_non_negative_int
from ..core.enums import SalaryType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Allowance:
    """Named allowance slot. An empty name marks an unused slot."""

    name: str
    amount: int

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValidationError(f"allowance name must be a string, got {self.name!r}")
        require_non_negative_int(self.amount, "allowance amount")

    @property
    def is_used(self) -> bool:
        return bool(self.name and self.name.strip())


@dataclass(frozen=True)
class ResidentTax:
    june: int
    other: int

    def __post_init__(self):
        require_non_negative_int(self.june, "resident tax (June)")
        require_non_negative_int(self.other, "resident tax (other months)")


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee master record.

    `base_salary` is an hourly rate, a daily rate or a monthly amount
    depending on `salary_type`. A `salary_type` of None means unspecified.
    """

    employee_id: str
    employee_number: str
    name: str
    salary_type: Optional[SalaryType]
    base_salary: int
    transportation_allowance: int = 0
    allowances: tuple[Allowance, ...] = field(default_factory=tuple)
    dependents: int = 0
    health_insurance: int = 0
    nursing_insurance: int = 0
    pension_insurance: int = 0
    resident_tax: ResidentTax = field(default_factory=lambda: ResidentTax(june=0, other=0))
    paid_leave_remaining: int = 0

    def __post_init__(self):
        object.__setattr__(self, "employee_id", require_non_empty(self.employee_id, "employee id"))
        object.__setattr__(self, "employee_number", require_non_empty(self.employee_number, "employee number"))
        if self.salary_type is not None and not isinstance(self.salary_type, SalaryType):
            raise ValidationError(f"unknown salary type {self.salary_type!r}")
        for name in (
            "base_salary",
            "transportation_allowance",
            "dependents",
            "health_insurance",
            "nursing_insurance",
            "pension_insurance",
            "paid_leave_remaining",
        ):
            require_non_negative_int(getattr(self, name), name)
        if not isinstance(self.resident_tax, ResidentTax):
            raise ValidationError(f"resident_tax must be a ResidentTax, got {self.resident_tax!r}")
        # Lists coming from callers are frozen so the record stays immutable.
        allowances = tuple(self.allowances)
        for a in allowances:
            if not isinstance(a, Allowance):
                raise ValidationError(f"allowances must hold Allowance entries, got {a!r}")
        object.__setattr__(self, "allowances", allowances)

    @property
    def allowances_total(self) -> int:
        return sum(a.amount for a in self.allowances if a.is_used)
