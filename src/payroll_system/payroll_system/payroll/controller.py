from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.labels import salary_type_label
from ..core.exceptions import ValidationError
from ..container import Container


def _int_arg(name: str) -> int:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a whole number")


def _statement_json(statement) -> dict:
    data = statement.to_dict()
    data["salary_type_label"] = salary_type_label(statement.salary_type)
    return data


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll/<employee_id>/<period>", methods=["GET"], endpoint="api_payroll_statement")
    def api_payroll_statement(employee_id: str, period: str):
        try:
            statement = service.statement_for(
                employee_id,
                period,
                paid_leave_days=_int_arg("paid_leave_days"),
                overtime_minutes=_int_arg("overtime_minutes"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if statement is None:
            return jsonify({"success": False, "message": "Employee not found"}), 404
        return jsonify({"success": True, "statement": _statement_json(statement)})

    @app.route("/api/payroll/roster/<period>", methods=["GET"], endpoint="api_payroll_roster")
    def api_payroll_roster(period: str):
        try:
            report = service.monthly_roster(period)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify(
            {
                "success": True,
                "period": report.period.key,
                "statements": [_statement_json(s) for s in report.statements],
                "totals": report.totals.to_dict(),
            }
        )

    @app.route("/api/payroll/<employee_id>/year/<int:year>", methods=["GET"], endpoint="api_payroll_yearly")
    def api_payroll_yearly(employee_id: str, year: int):
        try:
            report = service.yearly_report(employee_id, year)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if report is None:
            return jsonify({"success": False, "message": "Employee not found"}), 404
        return jsonify(
            {
                "success": True,
                "year": report.year,
                "employee_number": report.employee.employee_number,
                "employee_name": report.employee.name,
                "statements": [_statement_json(s) for s in report.statements],
                "totals": report.totals.to_dict(),
            }
        )
