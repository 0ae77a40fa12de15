"""Display labels for the presentation layer."""

from __future__ import annotations

from typing import Optional

from ..core.enums import SalaryType

SALARY_TYPE_LABELS = {
    SalaryType.HOURLY: "時給",
    SalaryType.DAILY_MONTHLY: "日給月給",
    SalaryType.FIXED: "固定給",
}


def salary_type_label(salary_type: Optional[SalaryType]) -> str:
    return SALARY_TYPE_LABELS.get(salary_type, "未設定")
