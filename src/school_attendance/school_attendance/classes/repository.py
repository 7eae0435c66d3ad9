from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SchoolClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def add(self, school_class: SchoolClass) -> None:
        raise NotImplementedError

    def find_by_id(self, class_id: str) -> Optional[SchoolClass]:
        raise NotImplementedError

    def find_by_name(self, name: str) -> Optional[SchoolClass]:
        raise NotImplementedError

    def is_empty(self) -> bool:
        raise NotImplementedError
