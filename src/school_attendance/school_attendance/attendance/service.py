from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import format_locale_date, format_locale_time, now_local
from ..common.ids import new_record_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .qr import parse_student_qr
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: teacher marks attendance and reviews records."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def mark(
        self,
        *,
        student_id: str,
        teacher_id: str,
        status: AttendanceStatus | str = AttendanceStatus.PRESENT,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = now or now_local()

        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Status must be Present or Absent")

        student = self._students.find_by_id(student_id)
        if not student:
            raise ValidationError("Student not found")

        record = AttendanceRecord(
            id=new_record_id("attendance"),
            student_id=student.id,
            student_name=student.name,
            date=format_locale_date(now),
            time=format_locale_time(now),
            status=status,
            teacher_id=teacher_id,
        )
        self._attendance.add(record)
        return record

    def mark_from_qr(self, payload: str, *, teacher_id: str, now: Optional[datetime] = None) -> AttendanceRecord:
        if not payload or not payload.strip():
            raise ValidationError("QR code must not be empty")

        student_id = parse_student_qr(payload)
        if not student_id:
            raise ValidationError("QR code is not a student code")
        return self.mark(student_id=student_id, teacher_id=teacher_id, now=now)

    def today_records(self, *, now: Optional[datetime] = None) -> List[AttendanceRecord]:
        now = now or now_local()
        return list(self._attendance.list_for_date(format_locale_date(now)))

    def records_for_teacher(self, teacher_id: str) -> List[AttendanceRecord]:
        return list(self._attendance.list_by_teacher(teacher_id))

    def records_for_student(self, student_id: str) -> List[AttendanceRecord]:
        return list(self._attendance.list_by_student(student_id))

    def all_records(self) -> List[AttendanceRecord]:
        return list(self._attendance.list_all())
