from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    ``class_name`` is matched against SchoolClass.name and ``teacher_id``
    against Teacher.id; neither reference is enforced.
    """

    id: str
    name: str
    class_name: str
    parent_name: str
    parent_email: str
    parent_phone: str = ""
    teacher_id: Optional[str] = None
    student_code: Optional[str] = None
