from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta

from ..common.validators import require_non_negative_int
from ..core.constants import PERIOD_CLOSING_DAY, RESIDENT_TAX_ASSESSMENT_MONTH
from ..core.exceptions import ValidationError

_PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, order=True)
class PayPeriod:
    """One monthly payroll cycle, keyed as YYYY-MM."""

    year: int
    month: int

    def __post_init__(self):
        require_non_negative_int(self.year, "year")
        require_non_negative_int(self.month, "month")
        if not 1 <= self.month <= 12:
            raise ValidationError(f"month out of range: {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValidationError(f"year out of range: {self.year}")

    @classmethod
    def parse(cls, value) -> "PayPeriod":
        if isinstance(value, cls):
            return value
        m = _PERIOD_RE.match(str(value or "").strip())
        if not m:
            raise ValidationError(f"pay period must look like YYYY-MM, got {value!r}")
        return cls(year=int(m.group(1)), month=int(m.group(2)))

    @classmethod
    def months_of(cls, year: int) -> list["PayPeriod"]:
        return [cls(year=int(year), month=m) for m in range(1, 13)]

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def is_june(self) -> bool:
        return self.month == RESIDENT_TAX_ASSESSMENT_MONTH

    def contains(self, day: date) -> bool:
        """Attendance is selected by calendar month, like a YYYY-MM prefix match."""
        return day.year == self.year and day.month == self.month

    def closing_window(self) -> tuple[date, date]:
        """(26th of the prior month, 25th of this month), both inclusive."""
        if (self.year, self.month) == (1, 1):
            raise ValidationError("period 0001-01 has no prior month to open from")
        end = date(self.year, self.month, PERIOD_CLOSING_DAY)
        prior_month_end = date(self.year, self.month, 1) - timedelta(days=1)
        start = prior_month_end.replace(day=PERIOD_CLOSING_DAY + 1)
        return start, end

    def __str__(self) -> str:
        return self.key
