from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def upsert(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        """Insert or overwrite the record for (employee_id, work_date) atomically."""

        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records newest first, optionally bounded (inclusive)."""

        raise NotImplementedError

    def count_status_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
        status: AttendanceStatus,
    ) -> int:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
