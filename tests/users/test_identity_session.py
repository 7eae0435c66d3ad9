from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.core.enums import Role
from src.school_attendance.school_attendance.core.exceptions import AuthenticationError, AuthorizationError
from src.school_attendance.school_attendance.database.kv_store import MemoryKeyValueStore
from src.school_attendance.school_attendance.users.service import IdentitySession, dashboard_for


def test_login_with_matching_email_and_role(seeded):
    session = seeded.open_session()

    assert session.login("admin@school.com", "admin") is True
    user = session.current_user()
    assert user.id == "admin-1"
    assert user.role == Role.ADMIN
    assert session.is_authenticated


def test_login_fails_without_exact_pair(seeded):
    session = seeded.open_session()

    assert session.login("admin@school.com", Role.PARENT) is False
    assert session.login("nobody@school.com", "admin") is False
    assert session.login("admin@school.com", "superuser") is False
    assert session.current_user() is None


def test_email_match_is_case_sensitive(seeded):
    session = seeded.open_session()

    assert session.login("Admin@School.com", "admin") is False


def test_logout_clears_and_is_idempotent(seeded):
    session = seeded.open_session()
    session.login("teacher@school.com", "teacher")

    session.logout()
    session.logout()

    assert session.current_user() is None
    assert not session.is_authenticated


def test_fresh_login_overwrites_current_user(seeded):
    session = seeded.open_session()
    session.login("teacher@school.com", "teacher")
    session.login("parent@school.com", "parent")

    assert session.current_user().id == "parent-1"


def test_failed_login_keeps_previous_user(seeded):
    session = seeded.open_session()
    session.login("teacher@school.com", "teacher")

    assert session.login("ghost@school.com", "teacher") is False
    assert session.current_user().id == "teacher-1"


def test_session_is_restored_from_its_store(seeded):
    session_store = MemoryKeyValueStore()
    seeded.open_session(session_store).login("parent@school.com", "parent")

    restored = IdentitySession(seeded.users_repo, session_store)

    assert restored.current_user().email == "parent@school.com"


def test_sessions_over_separate_stores_are_independent(seeded):
    first = seeded.open_session(MemoryKeyValueStore())
    second = seeded.open_session(MemoryKeyValueStore())

    first.login("admin@school.com", "admin")

    assert second.current_user() is None


def test_require_role(seeded):
    session = seeded.open_session()
    with pytest.raises(AuthenticationError):
        session.require_role(Role.ADMIN)

    session.login("parent@school.com", "parent")
    with pytest.raises(AuthorizationError):
        session.require_role(Role.ADMIN, Role.TEACHER)
    assert session.require_role(Role.PARENT).id == "parent-1"
    assert session.require_role().id == "parent-1"


def test_every_role_has_a_dashboard():
    assert {role: dashboard_for(role) for role in Role} == {
        Role.ADMIN: "/admin",
        Role.TEACHER: "/teacher",
        Role.PARENT: "/parent",
    }
