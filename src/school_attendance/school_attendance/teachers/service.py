from __future__ import annotations

from typing import List, Optional

from ..common.ids import new_record_id
from ..common.validators import require_non_empty
from .model import Teacher
from .repository import TeacherRepository


class TeacherService:
    """Use case: admin manages teachers."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def add_teacher(self, *, teacher_code: str, name: str, email: str, phone: Optional[str] = "") -> Teacher:
        teacher = Teacher(
            id=new_record_id("teacher"),
            teacher_code=require_non_empty(teacher_code, "Teacher ID"),
            name=require_non_empty(name, "Name"),
            email=require_non_empty(email, "Email"),
            phone=(phone or "").strip(),
        )
        self._teachers.add(teacher)
        return teacher

    def list_teachers(self) -> List[Teacher]:
        return list(self._teachers.list_all())
