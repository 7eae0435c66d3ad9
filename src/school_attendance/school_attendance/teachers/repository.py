from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Teacher


class TeacherRepository(Protocol):
    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def add(self, teacher: Teacher) -> None:
        """Append the teacher and register it as a user if not already one."""

        raise NotImplementedError

    def find_by_id(self, teacher_id: str) -> Optional[Teacher]:
        raise NotImplementedError

    def is_empty(self) -> bool:
        raise NotImplementedError

    def add_without_user(self, teacher: Teacher) -> None:
        raise NotImplementedError
