from __future__ import annotations

from enum import Enum
from typing import Optional


class SalaryType(str, Enum):
    """Salary policy deciding how base pay is derived from attendance."""

    HOURLY = "hourly"
    DAILY_MONTHLY = "daily_monthly"
    FIXED = "fixed"

    @classmethod
    def parse(cls, value) -> Optional["SalaryType"]:
        """Accept a code, a member or a legacy display label.

        Returns None for unknown values so callers decide on the fallback.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        return _SALARY_TYPE_ALIASES.get(str(value).strip())


_SALARY_TYPE_ALIASES = {
    "hourly": SalaryType.HOURLY,
    "daily_monthly": SalaryType.DAILY_MONTHLY,
    "dailyMonthly": SalaryType.DAILY_MONTHLY,
    "daily": SalaryType.DAILY_MONTHLY,
    "fixed": SalaryType.FIXED,
    # Labels stored by the legacy UI.
    "時給": SalaryType.HOURLY,
    "日給月給": SalaryType.DAILY_MONTHLY,
    "固定給": SalaryType.FIXED,
}
