from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles, also used to pick the dashboard after login."""

    ADMIN = "admin"
    TEACHER = "teacher"
    PARENT = "parent"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the records collection."""

    PRESENT = "Present"
    ABSENT = "Absent"


class GradeBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


def parse_role(value: "Role | str") -> Role | None:
    """Return the Role for ``value`` or None when it names no role."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None
