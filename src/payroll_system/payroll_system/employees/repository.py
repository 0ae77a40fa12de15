from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only view of the employee store.

    The payroll engine never writes employees; a missing employee is
    reported as None, not as an exception.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_employee_number(self, employee_number: str) -> Optional[Employee]:
        raise NotImplementedError

    def search(self, query: str) -> Sequence[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
