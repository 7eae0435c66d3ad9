from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def add(self, student: Student) -> None:
        raise NotImplementedError

    def find_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_class(self, class_name: str) -> Sequence[Student]:
        raise NotImplementedError

    def find_by_parent_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError
