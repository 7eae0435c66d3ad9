from __future__ import annotations

from typing import Iterable, List, Optional

from ..common.ids import new_record_id
from ..common.validators import require_all_non_empty, require_non_empty
from .model import SchoolClass
from .repository import ClassRepository


class ClassService:
    """Use case: admin creates classes and their subject lists."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def add_class(self, *, name: str, subjects: Iterable[str], teacher_id: Optional[str] = None) -> SchoolClass:
        school_class = SchoolClass(
            id=new_record_id("class"),
            name=require_non_empty(name, "Class name"),
            subjects=tuple(require_all_non_empty(subjects, "class name and all subjects")),
            teacher_id=teacher_id or None,
        )
        self._classes.add(school_class)
        return school_class

    def list_classes(self) -> List[SchoolClass]:
        return list(self._classes.list_all())
