from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ...core.constants import DEFAULT_EMPLOYMENT_INSURANCE_RATE, DEFAULT_INCOME_TAX_RATE
from ...core.exceptions import ConfigurationError

_MISSING = object()


def parse_rate(value, name: str) -> Decimal:
    """Turn a settings value into a non-negative Decimal fraction (0.05 = 5%)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConfigurationError(f"{name} is not configured")
    if isinstance(value, float):
        value = repr(value)
    try:
        rate = Decimal(str(value).strip())
    except InvalidOperation:
        raise ConfigurationError(f"{name} is not a number: {value!r}")
    if not rate.is_finite() or rate < 0:
        raise ConfigurationError(f"{name} must be a non-negative number, got {value!r}")
    return rate


@dataclass(frozen=True)
class PayrollRates:
    """Jurisdictional rates used by the deduction calculator."""

    employment_insurance_rate: Decimal = DEFAULT_EMPLOYMENT_INSURANCE_RATE
    income_tax_rate: Decimal = DEFAULT_INCOME_TAX_RATE

    def __post_init__(self):
        object.__setattr__(
            self, "employment_insurance_rate", parse_rate(self.employment_insurance_rate, "employment_insurance_rate")
        )
        object.__setattr__(self, "income_tax_rate", parse_rate(self.income_tax_rate, "income_tax_rate"))

    @classmethod
    def from_settings(cls, settings) -> "PayrollRates":
        """Read EMPLOYMENT_INSURANCE_RATE / INCOME_TAX_RATE from a settings module.

        An absent attribute falls back to the documented default; a present
        but empty or invalid value raises ConfigurationError.
        """
        employment = getattr(settings, "EMPLOYMENT_INSURANCE_RATE", _MISSING)
        income_tax = getattr(settings, "INCOME_TAX_RATE", _MISSING)
        return cls(
            employment_insurance_rate=DEFAULT_EMPLOYMENT_INSURANCE_RATE if employment is _MISSING else employment,
            income_tax_rate=DEFAULT_INCOME_TAX_RATE if income_tax is _MISSING else income_tax,
        )
