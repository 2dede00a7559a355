from __future__ import annotations

from flask import Flask, g

from ..common.http import ok, request_params
from ..common.validators import parse_int
from ..container import Container
from .model import record_to_dict, summary_to_dict
from .service import AttendanceListing


def _listing_payload(listing: AttendanceListing) -> dict:
    return {
        "attendance": [record_to_dict(r) for r in listing.records],
        "summary": summary_to_dict(listing.summary),
    }


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    service = container.attendance_service

    @app.route("/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    @guards.admin_required
    def mark_attendance():
        params = request_params()
        employee_id = parse_int(params.get("employeeId") or params.get("employee"), "Employee ID")
        record = service.mark_attendance(employee_id, params.get("date"), params.get("status"))
        return ok({"message": "Attendance marked successfully", "attendance": record_to_dict(record)})

    @app.route("/attendance", methods=["GET", "POST"], endpoint="list_attendance")
    @guards.admin_required
    def list_attendance():
        params = request_params()
        employee_id = parse_int(params.get("employeeId"), "Employee ID")
        listing = service.list_attendance(employee_id, month=params.get("month"), year=params.get("year"))
        return ok(_listing_payload(listing))

    @app.route("/me/attendance", methods=["GET", "POST"], endpoint="my_attendance")
    @guards.employee_required
    def my_attendance():
        params = request_params()
        listing = service.list_attendance(
            g.current_employee.employee_id,
            month=params.get("month"),
            year=params.get("year"),
        )
        return ok(_listing_payload(listing))

    @app.route("/me/attendance/mark", methods=["POST"], endpoint="mark_my_attendance")
    @guards.employee_required
    def mark_my_attendance():
        params = request_params()
        record = service.mark_own_attendance(g.current_employee, params.get("date"), params.get("status"))
        return ok({"message": "Attendance marked successfully", "attendance": record_to_dict(record)})
