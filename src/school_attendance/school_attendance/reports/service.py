from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_locale_date, now_local
from ..core.constants import DEFAULT_MAX_MARKS
from ..grades.model import Grade
from ..grades.repository import GradeRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from . import calculator

DEMO_STUDENT_ID = "demo-student-1"
DEMO_TEACHER_ID = "demo-teacher"
DEMO_GRADES = (("Mathematics", 85), ("Science", 92), ("English", 78), ("History", 88))


@dataclass(frozen=True)
class GradeRow:
    grade: Grade
    percentage: int
    band: str


@dataclass(frozen=True)
class StudentReport:
    """Read-model for the parent dashboard."""

    student: Student
    attendance: List[AttendanceRecord]
    grades: List[GradeRow]
    present_count: int
    absent_count: int
    attendance_percentage: int
    average_grade: int


class ParentReportService:
    """Use case: a parent views one student's attendance and grades."""

    def __init__(self, students: StudentRepository, attendance: AttendanceRepository, grades: GradeRepository):
        self._students = students
        self._attendance = attendance
        self._grades = grades

    def student_for_parent(self, parent_email: str) -> Optional[Student]:
        """Student registered with this parent email.

        Falls back to the first registered student when none matches, so the
        demo parent account always has something to show.
        """
        student = self._students.find_by_parent_email(parent_email)
        if student:
            return student

        students = self._students.list_all()
        return students[0] if students else None

    def ensure_demo_data(self, parent_name: str, parent_email: str, now: Optional[datetime] = None) -> Student:
        """Give the demo parent account something to look at.

        With no students at all a demo student is registered for this parent.
        A student without grades gets four fixed demo grades. Attendance is
        left alone.
        """
        student = self.student_for_parent(parent_email)
        if student is None:
            student = Student(
                id=DEMO_STUDENT_ID,
                name="Alex Johnson",
                class_name="Grade 10-A",
                parent_name=parent_name or "Parent",
                parent_email=parent_email or "parent@school.com",
                parent_phone="1234567890",
            )
            self._students.add(student)

        if not self._grades.list_by_student(student.id):
            date = format_locale_date(now or now_local())
            for i, (subject, marks) in enumerate(DEMO_GRADES, start=1):
                self._grades.add(
                    Grade(
                        id=f"demo-grade-{i}",
                        student_id=student.id,
                        subject=subject,
                        marks=marks,
                        max_marks=DEFAULT_MAX_MARKS,
                        date=date,
                        teacher_id=DEMO_TEACHER_ID,
                    )
                )
        return student

    def build_report(self, parent_email: str) -> Optional[StudentReport]:
        student = self.student_for_parent(parent_email)
        if not student:
            return None

        records = list(self._attendance.list_by_student(student.id))
        grades = list(self._grades.list_by_student(student.id))

        rows = []
        for g in grades:
            pct = calculator.grade_percentage(g)
            rows.append(GradeRow(grade=g, percentage=pct, band=calculator.grade_band(pct).value))

        return StudentReport(
            student=student,
            attendance=records,
            grades=rows,
            present_count=calculator.present_count(records),
            absent_count=calculator.absent_count(records),
            attendance_percentage=calculator.attendance_percentage(records),
            average_grade=calculator.average_grade(grades),
        )
