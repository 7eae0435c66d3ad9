from __future__ import annotations

from typing import List, Optional

from ..core.constants import STUDENTS_KEY
from ..database.collection import CollectionRepository
from ..database.kv_store import KeyValueStore
from .model import Student
from .repository import StudentRepository


def student_to_record(student: Student) -> dict:
    record = {
        "id": student.id,
        "name": student.name,
        "class": student.class_name,
        "parentName": student.parent_name,
        "parentEmail": student.parent_email,
        "parentPhone": student.parent_phone,
    }
    if student.student_code is not None:
        record["studentId"] = student.student_code
    if student.teacher_id is not None:
        record["teacherId"] = student.teacher_id
    return record


def student_from_record(row: dict) -> Student:
    return Student(
        id=str(row["id"]),
        name=row["name"],
        class_name=row["class"],
        parent_name=row["parentName"],
        parent_email=row["parentEmail"],
        parent_phone=row.get("parentPhone") or "",
        teacher_id=row.get("teacherId"),
        student_code=row.get("studentId"),
    )


class KVStudentRepository(StudentRepository):
    def __init__(self, store: KeyValueStore):
        self._collection = CollectionRepository(
            store, STUDENTS_KEY, to_record=student_to_record, from_record=student_from_record
        )

    def list_all(self) -> List[Student]:
        return self._collection.list_all()

    def add(self, student: Student) -> None:
        self._collection.add(student)

    def find_by_id(self, student_id: str) -> Optional[Student]:
        return self._collection.find_by_id(student_id)

    def list_by_class(self, class_name: str) -> List[Student]:
        return self._collection.filter_by(lambda s: s.class_name == class_name)

    def find_by_parent_email(self, email: str) -> Optional[Student]:
        return self._collection.find_by(lambda s: s.parent_email == email)
