"""Payslip output: JSON bytes or a one-page PDF.

The PDF is an HTML template rendered with Jinja2 and laid out by WeasyPrint.
Content that ever outgrows the page flows onto a second page.
"""

from __future__ import annotations

import json
from decimal import Decimal

from jinja2 import Environment, PackageLoader, select_autoescape

from ..core.enums import PayslipFormat
from ..core.exceptions import ValidationError
from .model import SalaryResult, payslip_to_dict

FOOTER_TEXT = "This is a computer-generated payslip. No signature required."

_env = Environment(
    loader=PackageLoader("hr_payroll", "templates"),
    autoescape=select_autoescape(["html"]),
)


def _money(value: Decimal) -> str:
    return f"{Decimal(value):.2f}"


def payslip_rows(result: SalaryResult) -> list[tuple[str, str]]:
    """Earnings table rows, in display order."""

    return [
        ("Base Monthly Salary", _money(result.base_salary)),
        ("Per Day Salary", _money(result.per_day_salary)),
        ("Total Days in Month", str(result.total_days_in_month)),
        ("Present Days", str(result.present_days)),
        ("Calculated Net Salary", _money(result.calculated_salary)),
    ]


def render_payslip_html(result: SalaryResult) -> str:
    employee = result.employee
    return _env.get_template("payslip.html").render(
        title="SALARY SLIP",
        period=result.period_label,
        details=[
            ("Employee Name", employee.name),
            ("Employee ID", employee.emp_code),
            ("Username", employee.username),
            ("Designation", employee.designation),
        ],
        rows=payslip_rows(result),
        net_payable=_money(result.calculated_salary),
        footer=FOOTER_TEXT,
    )


def render_payslip_pdf(result: SalaryResult) -> bytes:
    # WeasyPrint loads native Pango/Cairo libraries at import time.
    from weasyprint import HTML

    return HTML(string=render_payslip_html(result)).write_pdf()


def render_payslip(result: SalaryResult, fmt) -> bytes:
    try:
        fmt = PayslipFormat(fmt)
    except ValueError:
        raise ValidationError(f"Unsupported payslip format: {fmt}") from None

    if fmt == PayslipFormat.JSON:
        return json.dumps(payslip_to_dict(result)).encode("utf-8")
    return render_payslip_pdf(result)


def payslip_filename(result: SalaryResult, *, own: bool = False) -> str:
    if own:
        return f"my_payslip_{result.year}_{result.month}.pdf"
    return f"payslip_{result.employee.emp_code}_{result.year}_{result.month}.pdf"
