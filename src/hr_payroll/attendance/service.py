from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds, now_local, parse_day
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceListing:
    records: Sequence[AttendanceRecord]
    summary: AttendanceSummary


def parse_status(value) -> AttendanceStatus:
    if value is None or value == "":
        return AttendanceStatus.PRESENT
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(f'"{s.value}"' for s in AttendanceStatus)
        raise ValidationError(f"Status must be one of {allowed}") from None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        allow_self_marking: bool = False,
    ):
        self._attendance = attendance
        self._employees = employees
        self._allow_self_marking = bool(allow_self_marking)

    def _require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def mark_attendance(self, employee_id: int, day, status=None) -> AttendanceRecord:
        if day is None or day == "":
            raise ValidationError("Date is required")
        work_date = parse_day(day)
        resolved = parse_status(status)
        self._require_employee(employee_id)

        record = self._attendance.upsert(employee_id=employee_id, work_date=work_date, status=resolved)
        logger.info("attendance marked employee=%s date=%s status=%s", employee_id, work_date, resolved.value)
        return record

    def mark_own_attendance(self, employee: Employee, day=None, status=None) -> AttendanceRecord:
        if not self._allow_self_marking:
            raise AuthorizationError("Self-service attendance marking is disabled")
        return self.mark_attendance(employee.employee_id, day or now_local().date(), status)

    def list_attendance(self, employee_id: int, *, month=None, year=None) -> AttendanceListing:
        """Records for the id, newest first. Unknown or deleted ids give an empty listing."""

        start: Optional[date] = None
        end: Optional[date] = None
        if month not in (None, "") and year not in (None, ""):
            start, end = month_bounds(year, month)

        records = self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)
        return AttendanceListing(records=records, summary=AttendanceSummary.of(records))
