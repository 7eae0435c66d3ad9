from __future__ import annotations

from src.school_attendance.school_attendance.core.constants import USERS_KEY
from src.school_attendance.school_attendance.core.enums import Role
from src.school_attendance.school_attendance.database.kv_store import MemoryKeyValueStore
from src.school_attendance.school_attendance.users.kv_user_repository import KVUserRepository
from src.school_attendance.school_attendance.users.model import User


def _user(uid: str, email: str = "a@school.com", role: Role = Role.PARENT) -> User:
    return User(id=uid, name=f"User {uid}", email=email, role=role)


def test_empty_collection_lists_empty():
    repo = KVUserRepository(MemoryKeyValueStore())
    assert repo.list_all() == []
    assert repo.is_empty()


def test_add_appends_once_at_the_end():
    repo = KVUserRepository(MemoryKeyValueStore())
    repo.add(_user("u1"))
    before = repo.list_all()

    new_user = _user("u2", email="b@school.com")
    repo.add(new_user)
    after = repo.list_all()

    assert len(after) == len(before) + 1
    assert after[-1] == new_user
    assert after[:-1] == before


def test_duplicates_are_not_rejected():
    repo = KVUserRepository(MemoryKeyValueStore())
    repo.add(_user("u1"))
    repo.add(_user("u1"))

    assert [u.id for u in repo.list_all()] == ["u1", "u1"]


def test_find_returns_first_match_in_insertion_order():
    repo = KVUserRepository(MemoryKeyValueStore())
    repo.add(User(id="first", name="First", email="same@school.com", role=Role.PARENT))
    repo.add(User(id="second", name="Second", email="same@school.com", role=Role.PARENT))

    assert repo.find_by_email_and_role("same@school.com", Role.PARENT).id == "first"
    assert repo.find_by_id("second").name == "Second"
    assert repo.find_by_id("nope") is None


def test_non_list_value_is_treated_as_empty():
    store = MemoryKeyValueStore()
    store.set(USERS_KEY, {"id": "admin-1"})

    assert KVUserRepository(store).list_all() == []


def test_malformed_rows_are_skipped_but_kept_on_write():
    store = MemoryKeyValueStore()
    store.set(USERS_KEY, [{"id": "broken"}])
    repo = KVUserRepository(store)

    assert repo.list_all() == []

    repo.add(_user("u1"))
    assert [u.id for u in repo.list_all()] == ["u1"]
    assert store.get(USERS_KEY)[0] == {"id": "broken"}


def test_records_use_the_stored_field_names():
    store = MemoryKeyValueStore()
    KVUserRepository(store).add(User(id="u1", name="A", email="a@school.com", role=Role.ADMIN, phone="1"))

    assert store.get(USERS_KEY) == [
        {"id": "u1", "name": "A", "email": "a@school.com", "role": "admin", "phone": "1"}
    ]
