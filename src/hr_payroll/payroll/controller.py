from __future__ import annotations

import logging

from flask import Flask, g

from ..common.http import ok, request_params
from ..common.validators import parse_int
from ..container import Container
from ..core.enums import PayslipFormat
from ..core.exceptions import ValidationError
from .model import SalaryResult, payslip_to_dict
from .renderer import payslip_filename, render_payslip

logger = logging.getLogger(__name__)


def _period(params: dict) -> tuple:
    month = params.get("month")
    year = params.get("year")
    if month in (None, "") or year in (None, ""):
        raise ValidationError("Month and year required")
    return year, month


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    salaries = container.salary_service

    def _admin_result() -> SalaryResult:
        params = request_params()
        employee_id = params.get("employeeId")
        if employee_id in (None, ""):
            raise ValidationError("Employee ID, month, and year required")
        year, month = _period(params)
        return salaries.compute_salary(parse_int(employee_id, "Employee ID"), year, month)

    def _own_result() -> SalaryResult:
        year, month = _period(request_params())
        return salaries.compute_salary(g.current_employee.employee_id, year, month)

    def _pdf_response(result: SalaryResult, *, own: bool):
        # Rendered fully before the response exists; errors never leave a partial file.
        pdf = render_payslip(result, PayslipFormat.PDF)
        filename = payslip_filename(result, own=own)
        logger.info("payslip pdf employee=%s period=%s bytes=%d", result.employee.employee_id, result.period_label, len(pdf))
        return app.response_class(
            pdf,
            mimetype="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/salary/generate", methods=["GET", "POST"], endpoint="generate_salary")
    @guards.admin_required
    def generate_salary():
        return ok({"payslip": payslip_to_dict(_admin_result())})

    @app.route("/salary/pdf", methods=["GET", "POST"], endpoint="salary_pdf")
    @guards.admin_required
    def salary_pdf():
        return _pdf_response(_admin_result(), own=False)

    @app.route("/me/payslip", methods=["GET", "POST"], endpoint="my_payslip")
    @guards.employee_required
    def my_payslip():
        return ok({"payslip": payslip_to_dict(_own_result())})

    @app.route("/me/payslip/pdf", methods=["GET", "POST"], endpoint="my_payslip_pdf")
    @guards.employee_required
    def my_payslip_pdf():
        return _pdf_response(_own_result(), own=True)
