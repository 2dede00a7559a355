from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import days_in_month, month_bounds, validate_month
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryResult

logger = logging.getLogger(__name__)


class SalaryService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardSalaryCalculator()

    def compute_salary(self, employee_id: int, year, month) -> SalaryResult:
        year, month = validate_month(year, month)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        start, end = month_bounds(year, month)
        present_days = self._attendance.count_status_between(
            employee.employee_id,
            start_date=start,
            end_date=end,
            status=AttendanceStatus.PRESENT,
        )
        total_days = days_in_month(year, month)
        breakdown = self._calculator.calculate(
            monthly_salary=employee.salary,
            present_days=present_days,
            days_in_month=total_days,
        )

        logger.debug("salary computed employee=%s period=%s/%s present=%s", employee.employee_id, month, year, present_days)
        return SalaryResult(
            employee=employee,
            year=year,
            month=month,
            present_days=present_days,
            total_days_in_month=total_days,
            base_salary=employee.salary,
            per_day_salary=breakdown.per_day_salary,
            calculated_salary=breakdown.calculated_salary,
        )
