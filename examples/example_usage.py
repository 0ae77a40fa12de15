"""Example: use the payroll service directly (without Flask).

Controllers are a thin layer; the calculations live in the services.
"""

import importlib
from datetime import date, datetime

from config import get_settings_module

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.core.enums import SalaryType
from src.payroll_system.payroll_system.employees.model import Allowance, Employee, ResidentTax


def main():
    settings = importlib.import_module(get_settings_module())
    employee = Employee(
        employee_id="1",
        employee_number="E001",
        name="Sato Hanako",
        salary_type=SalaryType.HOURLY,
        base_salary=1200,
        transportation_allowance=8000,
        allowances=(Allowance(name="Perfect attendance", amount=5000),),
        health_insurance=9800,
        pension_insurance=17934,
        resident_tax=ResidentTax(june=6500, other=6000),
    )
    attendance = [
        AttendanceRecord(
            record_id=str(day),
            employee_number="E001",
            work_date=date(2025, 6, day),
            clock_in_time=datetime(2025, 6, day, 9, 0),
            clock_out_time=datetime(2025, 6, day, 18, 0),
        )
        for day in range(2, 7)
    ]
    container = build_container(settings, employees=[employee], attendance=attendance)
    print(container.payroll_service.statement_for("1", "2025-06").to_dict())


if __name__ == "__main__":
    main()
