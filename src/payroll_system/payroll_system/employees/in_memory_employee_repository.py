from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import Employee


class InMemoryEmployeeRepository:
    """EmployeeRepository over an explicit snapshot of employees."""

    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[str, Employee] = {}
        self._by_number: dict[str, Employee] = {}
        for e in employees:
            if e.employee_id in self._by_id:
                raise ValidationError(f"duplicate employee id {e.employee_id}")
            if e.employee_number in self._by_number:
                raise ValidationError(f"duplicate employee number {e.employee_number}")
            self._by_id[e.employee_id] = e
            self._by_number[e.employee_number] = e

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(str(employee_id))

    def get_by_employee_number(self, employee_number: str) -> Optional[Employee]:
        return self._by_number.get(str(employee_number))

    def search(self, query: str) -> Sequence[Employee]:
        q = (query or "").strip()
        if not q:
            return self.list_all()
        lowered = q.lower()
        return [e for e in self._by_id.values() if lowered in e.name.lower() or q in e.employee_number]

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())
