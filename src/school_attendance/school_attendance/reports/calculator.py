"""Attendance and grade aggregates shown on the parent dashboard.

Percentages are rounded half up (2.5 -> 3), not with Python's banker's
rounding.
"""
from __future__ import annotations

import math
from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import GradeBand
from ..grades.model import Grade


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def present_count(records: Sequence[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.is_present)


def absent_count(records: Sequence[AttendanceRecord]) -> int:
    return len(records) - present_count(records)


def attendance_percentage(records: Sequence[AttendanceRecord]) -> int:
    if not records:
        return 0
    return round_half_up(present_count(records) / len(records) * 100)


def grade_ratio(grade: Grade) -> float:
    if not grade.max_marks:
        return 0.0
    return grade.marks / grade.max_marks * 100


def grade_percentage(grade: Grade) -> int:
    return round_half_up(grade_ratio(grade))


def average_grade(grades: Sequence[Grade]) -> int:
    if not grades:
        return 0
    return round_half_up(sum(grade_ratio(g) for g in grades) / len(grades))


def grade_band(percentage: float) -> GradeBand:
    if percentage >= 90:
        return GradeBand.EXCELLENT
    if percentage >= 80:
        return GradeBand.GOOD
    if percentage >= 70:
        return GradeBand.FAIR
    return GradeBand.POOR
