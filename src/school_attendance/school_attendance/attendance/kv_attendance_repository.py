from __future__ import annotations

from typing import List, Optional

from ..core.constants import ATTENDANCE_KEY
from ..core.enums import AttendanceStatus
from ..database.collection import CollectionRepository
from ..database.kv_store import KeyValueStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


def attendance_to_record(record: AttendanceRecord) -> dict:
    return {
        "id": record.id,
        "studentId": record.student_id,
        "studentName": record.student_name,
        "date": record.date,
        "time": record.time,
        "status": record.status.value,
        "teacherId": record.teacher_id,
    }


def attendance_from_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(row["id"]),
        student_id=str(row["studentId"]),
        student_name=row.get("studentName") or "",
        date=row["date"],
        time=row.get("time") or "",
        status=AttendanceStatus(row["status"]),
        teacher_id=row.get("teacherId") or "",
    )


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._collection = CollectionRepository(
            store, ATTENDANCE_KEY, to_record=attendance_to_record, from_record=attendance_from_record
        )

    def list_all(self) -> List[AttendanceRecord]:
        return self._collection.list_all()

    def add(self, record: AttendanceRecord) -> None:
        self._collection.add(record)

    def find_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._collection.find_by_id(record_id)

    def list_by_student(self, student_id: str) -> List[AttendanceRecord]:
        return self._collection.filter_by(lambda r: r.student_id == student_id)

    def list_by_teacher(self, teacher_id: str) -> List[AttendanceRecord]:
        return self._collection.filter_by(lambda r: r.teacher_id == teacher_id)

    def list_for_date(self, date_label: str) -> List[AttendanceRecord]:
        return self._collection.filter_by(lambda r: r.date == date_label)
