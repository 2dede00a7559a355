from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status for one calendar day."""

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceSummary:
    total_records: int
    present_days: int
    absent_days: int
    leave_days: int

    @classmethod
    def of(cls, records: Iterable[AttendanceRecord]) -> "AttendanceSummary":
        records = list(records)
        return cls(
            total_records=len(records),
            present_days=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
            absent_days=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
            leave_days=sum(1 for r in records if r.status == AttendanceStatus.LEAVE),
        )


def record_to_dict(record: AttendanceRecord) -> dict:
    return {
        "attendanceId": record.attendance_id,
        "employeeId": record.employee_id,
        "date": record.work_date.isoformat(),
        "status": record.status.value,
    }


def summary_to_dict(summary: AttendanceSummary) -> dict:
    return {
        "totalRecords": summary.total_records,
        "presentDays": summary.present_days,
        "absentDays": summary.absent_days,
        "leaveDays": summary.leave_days,
    }
