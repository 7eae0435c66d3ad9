from __future__ import annotations

from typing import List, Optional

from ..core.constants import GRADES_KEY
from ..database.collection import CollectionRepository
from ..database.kv_store import KeyValueStore
from .model import Grade
from .repository import GradeRepository


def grade_to_record(grade: Grade) -> dict:
    return {
        "id": grade.id,
        "studentId": grade.student_id,
        "subject": grade.subject,
        "marks": grade.marks,
        "maxMarks": grade.max_marks,
        "date": grade.date,
        "teacherId": grade.teacher_id,
    }


def grade_from_record(row: dict) -> Grade:
    return Grade(
        id=str(row["id"]),
        student_id=str(row["studentId"]),
        subject=row["subject"],
        marks=row["marks"],
        max_marks=row["maxMarks"],
        date=row.get("date") or "",
        teacher_id=row.get("teacherId") or "",
    )


class KVGradeRepository(GradeRepository):
    def __init__(self, store: KeyValueStore):
        self._collection = CollectionRepository(
            store, GRADES_KEY, to_record=grade_to_record, from_record=grade_from_record
        )

    def list_all(self) -> List[Grade]:
        return self._collection.list_all()

    def add(self, grade: Grade) -> None:
        self._collection.add(grade)

    def find_by_id(self, grade_id: str) -> Optional[Grade]:
        return self._collection.find_by_id(grade_id)

    def list_by_student(self, student_id: str) -> List[Grade]:
        return self._collection.filter_by(lambda g: g.student_id == student_id)
