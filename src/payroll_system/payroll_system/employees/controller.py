from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.labels import salary_type_label
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        employees = container.employees_repo.search(request.args.get("q", ""))
        return jsonify(
            {
                "success": True,
                "employees": [
                    {
                        "employee_id": e.employee_id,
                        "employee_number": e.employee_number,
                        "name": e.name,
                        "salary_type": e.salary_type.value if e.salary_type else None,
                        "salary_type_label": salary_type_label(e.salary_type),
                    }
                    for e in sorted(employees, key=lambda e: e.employee_number)
                ],
            }
        )
