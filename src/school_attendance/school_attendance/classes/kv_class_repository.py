from __future__ import annotations

from typing import List, Optional

from ..core.constants import CLASSES_KEY
from ..database.collection import CollectionRepository
from ..database.kv_store import KeyValueStore
from .model import SchoolClass
from .repository import ClassRepository


def class_to_record(school_class: SchoolClass) -> dict:
    record = {
        "id": school_class.id,
        "name": school_class.name,
        "subjects": list(school_class.subjects),
    }
    if school_class.teacher_id is not None:
        record["teacherId"] = school_class.teacher_id
    return record


def class_from_record(row: dict) -> SchoolClass:
    return SchoolClass(
        id=str(row["id"]),
        name=row["name"],
        subjects=tuple(row.get("subjects") or ()),
        teacher_id=row.get("teacherId"),
    )


class KVClassRepository(ClassRepository):
    def __init__(self, store: KeyValueStore):
        self._collection = CollectionRepository(
            store, CLASSES_KEY, to_record=class_to_record, from_record=class_from_record
        )

    def list_all(self) -> List[SchoolClass]:
        return self._collection.list_all()

    def add(self, school_class: SchoolClass) -> None:
        self._collection.add(school_class)

    def find_by_id(self, class_id: str) -> Optional[SchoolClass]:
        return self._collection.find_by_id(class_id)

    def find_by_name(self, name: str) -> Optional[SchoolClass]:
        return self._collection.find_by(lambda c: c.name == name)

    def is_empty(self) -> bool:
        return self._collection.is_empty()
