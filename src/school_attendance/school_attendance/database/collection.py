from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionRepository(Generic[T]):
    """One collection persisted as a JSON array under a single key.

    Every write is a read-modify-write of the whole array, so concurrent
    writers of the same collection lose updates (last write wins).
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        to_record: Callable[[T], dict],
        from_record: Callable[[dict], T],
    ):
        self._store = store
        self._key = key
        self._to_record = to_record
        self._from_record = from_record

    @property
    def key(self) -> str:
        return self._key

    def _rows(self) -> List[Any]:
        rows = self._store.get(self._key)
        if rows is None:
            return []
        if not isinstance(rows, list):
            logger.warning("Collection %r is not a list; treating it as empty", self._key)
            return []
        return rows

    def list_all(self) -> List[T]:
        items: List[T] = []
        for row in self._rows():
            try:
                items.append(self._from_record(row))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed record in %r: %s", self._key, e)
        return items

    def add(self, item: T) -> None:
        # Appends to the raw rows so records we cannot decode are kept as-is.
        rows = self._rows()
        rows.append(self._to_record(item))
        self._store.set(self._key, rows)

    def find_by(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self.list_all():
            if predicate(item):
                return item
        return None

    def filter_by(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self.list_all() if predicate(item)]

    def find_by_id(self, record_id: str) -> Optional[T]:
        return self.find_by(lambda item: getattr(item, "id", None) == record_id)

    def is_empty(self) -> bool:
        return not self._rows()
