from __future__ import annotations

from typing import List, Optional

from ..core.constants import TEACHERS_KEY
from ..core.enums import Role
from ..database.collection import CollectionRepository
from ..database.kv_store import KeyValueStore
from ..users.repository import UserRepository
from .model import Teacher
from .repository import TeacherRepository


def teacher_to_record(teacher: Teacher) -> dict:
    record = {
        "id": teacher.id,
        "teacherId": teacher.teacher_code,
        "name": teacher.name,
        "email": teacher.email,
        "role": teacher.role.value,
    }
    if teacher.phone is not None:
        record["phone"] = teacher.phone
    return record


def teacher_from_record(row: dict) -> Teacher:
    if row.get("role", Role.TEACHER.value) != Role.TEACHER.value:
        raise ValueError(f"teacher record with role {row.get('role')!r}")
    return Teacher(
        id=str(row["id"]),
        teacher_code=str(row["teacherId"]),
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
    )


class KVTeacherRepository(TeacherRepository):
    def __init__(self, store: KeyValueStore, users: UserRepository):
        self._collection = CollectionRepository(
            store, TEACHERS_KEY, to_record=teacher_to_record, from_record=teacher_from_record
        )
        self._users = users

    def list_all(self) -> List[Teacher]:
        return self._collection.list_all()

    def add(self, teacher: Teacher) -> None:
        # Two independent writes: the teacher list, then the user list.
        self._collection.add(teacher)
        if not self._users.find_by_email_and_role(teacher.email, teacher.role):
            self._users.add(teacher.as_user())

    def add_without_user(self, teacher: Teacher) -> None:
        self._collection.add(teacher)

    def find_by_id(self, teacher_id: str) -> Optional[Teacher]:
        return self._collection.find_by_id(teacher_id)

    def is_empty(self) -> bool:
        return self._collection.is_empty()
