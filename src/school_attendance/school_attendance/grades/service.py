from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import format_locale_date, now_local
from ..common.ids import new_record_id
from ..common.validators import require_non_empty, require_number
from ..core.constants import DEFAULT_MAX_MARKS
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import Grade
from .repository import GradeRepository


def _as_json_number(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


class GradeService:
    """Use case: teacher records marks for a student."""

    def __init__(self, grades: GradeRepository, students: StudentRepository):
        self._grades = grades
        self._students = students

    def record_grade(
        self,
        *,
        student_id: str,
        subject: str,
        marks,
        teacher_id: str,
        max_marks=DEFAULT_MAX_MARKS,
        now: Optional[datetime] = None,
    ) -> Grade:
        subject = require_non_empty(subject, "Subject")
        marks = require_number(marks, "Marks")
        max_marks = require_number(max_marks, "Max marks")

        if max_marks <= 0:
            raise ValidationError("Max marks must be greater than 0")
        if marks < 0 or marks > max_marks:
            raise ValidationError(f"Marks must be between 0 and {_as_json_number(max_marks)}")

        student = self._students.find_by_id(student_id)
        if not student:
            raise ValidationError("Student not found")

        grade = Grade(
            id=new_record_id("grade"),
            student_id=student.id,
            subject=subject,
            marks=_as_json_number(marks),
            max_marks=_as_json_number(max_marks),
            date=format_locale_date(now or now_local()),
            teacher_id=teacher_id,
        )
        self._grades.add(grade)
        return grade

    def grades_for_student(self, student_id: str) -> List[Grade]:
        return list(self._grades.list_by_student(student_id))
