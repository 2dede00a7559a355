from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role used for access checks."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Per-day attendance status stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"


class AuthStrategy(str, Enum):
    """Where the caller's identity is read from on each request."""

    BODY = "body"
    HEADER = "header"
    COOKIE = "cookie"


class PayslipFormat(str, Enum):
    JSON = "json"
    PDF = "pdf"
