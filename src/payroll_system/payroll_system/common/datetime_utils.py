from __future__ import annotations

from datetime import datetime


def minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() // 60)
