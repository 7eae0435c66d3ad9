from __future__ import annotations

import logging

import mysql.connector
import pytest

from src.school_attendance.school_attendance.container import build_store
from src.school_attendance.school_attendance.database.bootstrap import list_tables
from src.school_attendance.school_attendance.database.kv_store import (
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    MySQLKeyValueStore,
)


class FakeCursor:
    def __init__(self, table: dict):
        self._table = table
        self._row = None
        self._rows = []

    def execute(self, sql: str, params=()):
        sql = " ".join(sql.split())
        if sql.startswith("SELECT"):
            value = self._table.get(params[0])
            self._row = {"store_value": value} if value is not None else None
        elif sql.startswith("INSERT"):
            self._table[params[0]] = params[1]
        elif sql.startswith("DELETE FROM kv_store WHERE"):
            self._table.pop(params[0], None)
        elif sql == "SHOW TABLES":
            self._rows = [("kv_store",)]
        elif sql == "DELETE FROM kv_store":
            self._table.clear()

    def fetchone(self):
        return self._row

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict):
        self._table = table

    def cursor(self, dictionary: bool = False):
        return FakeCursor(self._table)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeFactory:
    def __init__(self):
        self.table: dict[str, str] = {}

    def connect(self):
        return FakeConnection(self.table)


class DownFactory:
    def connect(self):
        raise mysql.connector.Error("server has gone away")


def test_mysql_store_round_trip():
    factory = FakeFactory()
    store = MySQLKeyValueStore(factory)

    store.set("attendance_users", [{"id": "admin-1"}])
    store.set("attendance_users", [{"id": "admin-1"}, {"id": "parent-1"}])

    assert store.get("attendance_users") == [{"id": "admin-1"}, {"id": "parent-1"}]
    assert factory.table["attendance_users"].startswith("[")

    store.remove("attendance_users")
    assert store.get("attendance_users") is None

    store.set("a", 1)
    store.clear()
    assert factory.table == {}


def test_mysql_store_fails_soft_when_server_is_down(caplog):
    store = MySQLKeyValueStore(DownFactory())

    with caplog.at_level(logging.WARNING):
        store.set("k", [1])
        assert store.get("k") is None
        store.remove("k")

    assert "server has gone away" in caplog.text


def test_build_store_backends(tmp_path):
    assert isinstance(build_store("memory"), MemoryKeyValueStore)
    assert isinstance(build_store("file", storage_path=str(tmp_path / "s.json")), JsonFileKeyValueStore)

    with pytest.raises(ValueError):
        build_store("file")
    with pytest.raises(ValueError):
        build_store("redis")


def test_list_tables_returns_table_names():
    assert list_tables(FakeFactory()) == ["kv_store"]
