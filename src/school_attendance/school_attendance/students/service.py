from __future__ import annotations

from typing import List, Optional

from ..common.ids import new_record_id
from ..common.validators import require_non_empty
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: teacher registers students."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def register_student(
        self,
        *,
        student_code: str,
        name: str,
        class_name: str,
        parent_name: str,
        parent_email: str,
        parent_phone: Optional[str] = "",
        teacher_id: Optional[str] = None,
    ) -> Student:
        student = Student(
            id=new_record_id("student"),
            student_code=require_non_empty(student_code, "Student ID"),
            name=require_non_empty(name, "Name"),
            class_name=require_non_empty(class_name, "Class"),
            parent_name=require_non_empty(parent_name, "Parent name"),
            parent_email=require_non_empty(parent_email, "Parent email"),
            parent_phone=(parent_phone or "").strip(),
            teacher_id=teacher_id or None,
        )
        self._students.add(student)
        return student

    def list_students(self) -> List[Student]:
        return list(self._students.list_all())

    def list_by_class(self, class_name: str) -> List[Student]:
        return list(self._students.list_by_class(class_name))

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.find_by_id(student_id)
