from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark.

    ``date`` and ``time`` are display strings as recorded (``M/D/YYYY`` and
    ``h:MM:SS AM``), ``student_name`` is a copy taken at marking time.
    """

    id: str
    student_id: str
    student_name: str
    date: str
    time: str
    status: AttendanceStatus
    teacher_id: str

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT
