from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import mysql.connector

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised by a storage medium when a raw read/write fails."""


class KeyValueStore(Protocol):
    """Key-value medium holding JSON-serializable values.

    ``get`` returns None for a missing or unreadable entry and ``set`` never
    raises; callers treat every lookup as "maybe nothing".
    """

    def get(self, key: str) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class JsonKeyValueStore(KeyValueStore):
    """Stores values as JSON text on top of a raw string medium.

    Subclasses implement ``_read``/``_write``/``_delete``/``_clear`` and
    report medium failures as StorageError.
    """

    def get(self, key: str) -> Any:
        try:
            raw = self._read(key)
        except StorageError as e:
            logger.warning("Failed to read %r from storage: %s", key, e)
            return None

        if raw is None or raw == "":
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring corrupt storage entry %r", key)
            return None

    def set(self, key: str, value: Any) -> None:
        try:
            raw = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Failed to save %r to storage: %s", key, e)
            return

        try:
            self._write(key, raw)
        except StorageError as e:
            logger.error("Failed to save %r to storage: %s", key, e)

    def remove(self, key: str) -> None:
        try:
            self._delete(key)
        except StorageError as e:
            logger.error("Failed to remove %r from storage: %s", key, e)

    def clear(self) -> None:
        try:
            self._clear()
        except StorageError as e:
            logger.error("Failed to clear storage: %s", e)

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, raw: str) -> None:
        raise NotImplementedError

    def _delete(self, key: str) -> None:
        raise NotImplementedError

    def _clear(self) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(JsonKeyValueStore):
    """In-process store.

    ``capacity`` caps the total size (in characters of keys plus serialized
    values) to emulate a medium that rejects writes once full.
    """

    def __init__(self, *, capacity: Optional[int] = None):
        self._data: Dict[str, str] = {}
        self._capacity = capacity

    def keys(self) -> list[str]:
        return list(self._data)

    def raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put_raw(self, key: str, raw: str) -> None:
        """Write an unchecked value; used to plant corrupt entries."""
        self._data[key] = raw

    def _read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write(self, key: str, raw: str) -> None:
        if self._capacity is not None:
            used = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
            if used + len(key) + len(raw) > self._capacity:
                raise StorageError(f"quota of {self._capacity} exceeded")
        self._data[key] = raw

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)

    def _clear(self) -> None:
        self._data.clear()


class JsonFileKeyValueStore(JsonKeyValueStore):
    """Single JSON file mapping each key to its serialized value."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(str(e)) from e

        try:
            data = json.loads(text) if text.strip() else {}
        except ValueError:
            logger.warning("Storage file %s is corrupt; starting empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s has no key map; starting empty", self._path)
            return {}
        return data

    def _save(self, data: Dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(str(e)) from e

    def _read(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def _write(self, key: str, raw: str) -> None:
        data = self._load()
        data[key] = raw
        self._save(data)

    def _delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def _clear(self) -> None:
        self._save({})


class MySQLKeyValueStore(JsonKeyValueStore):
    """Rows of the ``kv_store`` table (see bootstrap.KV_SCHEMA)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _read(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise StorageError(str(e)) from e
        return row["store_value"] if row else None

    def _write(self, key: str, raw: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(store_key, store_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                    """,
                    (key, raw),
                )
        except mysql.connector.Error as e:
            raise StorageError(str(e)) from e

    def _delete(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))
        except mysql.connector.Error as e:
            raise StorageError(str(e)) from e

    def _clear(self) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store")
        except mysql.connector.Error as e:
            raise StorageError(str(e)) from e
