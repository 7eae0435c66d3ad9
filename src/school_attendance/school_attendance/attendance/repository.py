from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def add(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def list_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_teacher(self, teacher_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, date_label: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
