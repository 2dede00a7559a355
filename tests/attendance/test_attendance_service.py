from datetime import date, datetime, timedelta, timezone

import pytest

from hr_payroll.attendance import service as attendance_service_module
from hr_payroll.attendance.service import AttendanceService, parse_status
from hr_payroll.core.enums import AttendanceStatus
from hr_payroll.core.exceptions import AuthorizationError, NotFoundError, ValidationError


@pytest.fixture
def service(attendance_repo, employees_repo):
    return AttendanceService(attendance_repo, employees_repo)


def test_mark_defaults_to_present(service, worker):
    rec = service.mark_attendance(worker.employee_id, "2025-03-10")

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.work_date == date(2025, 3, 10)


def test_mark_same_day_twice_keeps_one_record(service, worker, attendance_repo):
    service.mark_attendance(worker.employee_id, "2025-03-10", "present")
    service.mark_attendance(worker.employee_id, "2025-03-10", "present")

    assert len(attendance_repo.all()) == 1


def test_mark_overwrites_status(service, worker, attendance_repo):
    first = service.mark_attendance(worker.employee_id, "2025-03-10", "present")
    second = service.mark_attendance(worker.employee_id, "2025-03-10", "absent")

    assert second.attendance_id == first.attendance_id
    assert [r.status for r in attendance_repo.all()] == [AttendanceStatus.ABSENT]


def test_mark_normalizes_datetime_to_day(service, worker):
    rec = service.mark_attendance(worker.employee_id, datetime(2025, 3, 10, 23, 15))

    assert rec.work_date == date(2025, 3, 10)


def test_mark_accepts_aware_iso_timestamp(service, worker):
    stamp = datetime(2025, 3, 10, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    rec = service.mark_attendance(worker.employee_id, stamp.isoformat())

    assert rec.work_date == stamp.astimezone().date()


@pytest.mark.parametrize("day", [None, ""])
def test_mark_requires_date(service, worker, day):
    with pytest.raises(ValidationError):
        service.mark_attendance(worker.employee_id, day)


def test_mark_rejects_bad_date(service, worker):
    with pytest.raises(ValidationError):
        service.mark_attendance(worker.employee_id, "10/03/2025")


def test_mark_rejects_unknown_status(service, worker, attendance_repo):
    with pytest.raises(ValidationError):
        service.mark_attendance(worker.employee_id, "2025-03-10", "holiday")
    assert attendance_repo.all() == []


def test_mark_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.mark_attendance(404, "2025-03-10")


def test_parse_status_is_case_insensitive():
    assert parse_status(" Leave ") == AttendanceStatus.LEAVE
    assert parse_status(None) == AttendanceStatus.PRESENT


def test_list_attendance_newest_first_with_summary(service, worker):
    service.mark_attendance(worker.employee_id, "2025-03-01", "present")
    service.mark_attendance(worker.employee_id, "2025-03-03", "absent")
    service.mark_attendance(worker.employee_id, "2025-03-02", "leave")
    service.mark_attendance(worker.employee_id, "2025-04-01", "present")

    listing = service.list_attendance(worker.employee_id, month=3, year=2025)

    assert [r.work_date.day for r in listing.records] == [3, 2, 1]
    assert listing.summary.total_records == 3
    assert listing.summary.present_days == 1
    assert listing.summary.absent_days == 1
    assert listing.summary.leave_days == 1


def test_list_attendance_without_period_returns_everything(service, worker):
    service.mark_attendance(worker.employee_id, "2025-03-01")
    service.mark_attendance(worker.employee_id, "2025-04-01")

    assert len(service.list_attendance(worker.employee_id).records) == 2


def test_list_attendance_unknown_employee_is_empty(service):
    listing = service.list_attendance(404, month=3, year=2025)

    assert list(listing.records) == []
    assert listing.summary.total_records == 0
    assert listing.summary.present_days == 0


def test_list_attendance_after_cascade_delete_is_empty(service, worker, attendance_repo, employees_repo):
    service.mark_attendance(worker.employee_id, "2025-03-01")
    employees_repo.delete_by_id(worker.employee_id)
    attendance_repo.delete_for_employee(worker.employee_id)

    assert list(service.list_attendance(worker.employee_id).records) == []


def test_self_marking_disabled_by_default(service, worker):
    with pytest.raises(AuthorizationError):
        service.mark_own_attendance(worker)


def test_self_marking_defaults_to_today(attendance_repo, employees_repo, worker, fixed_now, monkeypatch):
    monkeypatch.setattr(attendance_service_module, "now_local", lambda: fixed_now)
    service = AttendanceService(attendance_repo, employees_repo, allow_self_marking=True)

    rec = service.mark_own_attendance(worker)

    assert rec.work_date == fixed_now.date()
    assert rec.employee_id == worker.employee_id
