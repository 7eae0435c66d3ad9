from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Grade:
    """Domain entity: marks scored in one subject assessment."""

    id: str
    student_id: str
    subject: str
    marks: float
    max_marks: float
    date: str
    teacher_id: str
