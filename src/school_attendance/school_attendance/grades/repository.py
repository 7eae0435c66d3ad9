from __future__ import annotations

from typing import Protocol, Sequence

from .model import Grade


class GradeRepository(Protocol):
    def list_all(self) -> Sequence[Grade]:
        raise NotImplementedError

    def add(self, grade: Grade) -> None:
        raise NotImplementedError

    def list_by_student(self, student_id: str) -> Sequence[Grade]:
        raise NotImplementedError
