from __future__ import annotations

import logging

from flask import Flask

from src.school_attendance.school_attendance.database.flask_session_store import FlaskSessionStore
from src.school_attendance.school_attendance.database.kv_store import JsonFileKeyValueStore, MemoryKeyValueStore


def test_set_then_get_returns_equal_structure():
    store = MemoryKeyValueStore()
    value = {"name": "Grade 10-A", "subjects": ["Mathematics", "Science"], "size": 30, "active": True}

    store.set("classes", value)

    assert store.get("classes") == value


def test_get_unset_key_returns_none():
    assert MemoryKeyValueStore().get("missing") is None


def test_get_returns_a_copy_not_the_stored_object():
    store = MemoryKeyValueStore()
    rows = [{"id": "a"}]
    store.set("rows", rows)

    rows.append({"id": "b"})
    fetched = store.get("rows")
    fetched.append({"id": "c"})

    assert store.get("rows") == [{"id": "a"}]


def test_corrupt_entry_reads_as_none(caplog):
    store = MemoryKeyValueStore()
    store.put_raw("users", "{not json")

    with caplog.at_level(logging.WARNING):
        assert store.get("users") is None

    assert "corrupt" in caplog.text


def test_write_over_capacity_is_logged_and_keeps_old_value(caplog):
    store = MemoryKeyValueStore(capacity=40)
    store.set("k", [1, 2])

    with caplog.at_level(logging.ERROR):
        store.set("k", list(range(100)))

    assert store.get("k") == [1, 2]
    assert "Failed to save" in caplog.text


def test_unserializable_value_is_not_stored(caplog):
    store = MemoryKeyValueStore()

    with caplog.at_level(logging.ERROR):
        store.set("k", {"when": object()})

    assert store.get("k") is None
    assert "Failed to save" in caplog.text


def test_remove_and_clear():
    store = MemoryKeyValueStore()
    store.set("a", 1)
    store.set("b", 2)

    store.remove("a")
    store.remove("a")
    assert store.get("a") is None
    assert store.get("b") == 2

    store.clear()
    assert store.keys() == []


def test_file_store_persists_between_instances(tmp_path):
    path = tmp_path / "data" / "storage.json"
    JsonFileKeyValueStore(path).set("users", [{"id": "admin-1"}])

    assert JsonFileKeyValueStore(path).get("users") == [{"id": "admin-1"}]


def test_file_store_missing_or_corrupt_file_reads_as_none(tmp_path):
    path = tmp_path / "storage.json"
    store = JsonFileKeyValueStore(path)
    assert store.get("users") is None

    path.write_text("garbage", encoding="utf-8")
    assert store.get("users") is None

    store.set("users", [])
    assert store.get("users") == []


def test_file_store_remove_and_clear(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "storage.json")
    store.set("a", {"x": 1})
    store.set("b", {"y": 2})

    store.remove("a")
    assert store.get("a") is None
    assert store.get("b") == {"y": 2}

    store.clear()
    assert store.get("b") is None


def test_flask_session_store_outside_request_fails_soft():
    store = FlaskSessionStore()

    store.set("k", 1)
    assert store.get("k") is None


def test_flask_session_store_inside_request():
    app = Flask(__name__)
    app.secret_key = "test"
    store = FlaskSessionStore()

    with app.test_request_context("/"):
        store.set("attendance_current_user", {"id": "admin-1"})
        assert store.get("attendance_current_user") == {"id": "admin-1"}
        store.remove("attendance_current_user")
        assert store.get("attendance_current_user") is None
