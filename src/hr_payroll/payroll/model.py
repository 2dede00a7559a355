from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..employees.model import Employee, employee_to_dict


@dataclass(frozen=True)
class SalaryResult:
    """Monthly salary computed from attendance. Derived on every request, never stored."""

    employee: Employee
    year: int
    month: int
    present_days: int
    total_days_in_month: int
    base_salary: Decimal
    per_day_salary: Decimal
    calculated_salary: Decimal

    @property
    def period_label(self) -> str:
        return f"{self.month}/{self.year}"


def payslip_to_dict(result: SalaryResult) -> dict:
    return {
        "employee": employee_to_dict(result.employee),
        "year": result.year,
        "month": result.month,
        "presentDays": result.present_days,
        "totalDaysInMonth": result.total_days_in_month,
        "baseSalary": float(result.base_salary),
        "perDaySalary": float(result.per_day_salary),
        "calculatedSalary": float(result.calculated_salary),
    }
