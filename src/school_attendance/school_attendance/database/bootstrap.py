from __future__ import annotations

import logging

import mysql.connector

from ..classes.model import SchoolClass
from ..classes.repository import ClassRepository
from ..teachers.model import Teacher
from ..teachers.repository import TeacherRepository
from ..users.model import User
from ..users.repository import UserRepository
from ..core.enums import Role
from .connection import DatabaseConnection
from .mysql_base import fetchall

logger = logging.getLogger(__name__)


KV_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    store_key   VARCHAR(191) NOT NULL PRIMARY KEY,
    store_value LONGTEXT     NOT NULL,
    updated_at  TIMESTAMP    NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""

_CORE_SUBJECTS = ("Mathematics", "Science", "English", "History", "Geography")

DEFAULT_USERS = (
    User(id="admin-1", name="System Admin", email="admin@school.com", role=Role.ADMIN, phone="1234567890"),
    User(id="teacher-1", name="John Smith", email="teacher@school.com", role=Role.TEACHER, phone="1234567891"),
    User(id="parent-1", name="Sarah Johnson", email="parent@school.com", role=Role.PARENT, phone="1234567892"),
)

DEFAULT_TEACHERS = (
    Teacher(id="teacher-1", teacher_code="T001", name="John Smith", email="teacher@school.com", phone="1234567891"),
)

DEFAULT_CLASSES = (
    SchoolClass(id="class-1", name="Grade 10-A", subjects=_CORE_SUBJECTS),
    SchoolClass(id="class-2", name="Grade 10-B", subjects=_CORE_SUBJECTS),
    SchoolClass(
        id="class-3",
        name="Grade 11-A",
        subjects=("Advanced Mathematics", "Physics", "Chemistry", "English Literature", "Economics"),
    ),
)


def initialize_storage(users: UserRepository, teachers: TeacherRepository, classes: ClassRepository) -> None:
    """Populate each empty collection with its defaults.

    Each collection is checked on its own, so a second run over a populated
    store adds nothing.
    """

    if users.is_empty():
        for user in DEFAULT_USERS:
            users.add(user)
        logger.info("Seeded %d default users", len(DEFAULT_USERS))

    if teachers.is_empty():
        # The matching login user comes from DEFAULT_USERS.
        for teacher in DEFAULT_TEACHERS:
            teachers.add_without_user(teacher)
        logger.info("Seeded %d default teachers", len(DEFAULT_TEACHERS))

    if classes.is_empty():
        for school_class in DEFAULT_CLASSES:
            classes.add(school_class)
        logger.info("Seeded %d default classes", len(DEFAULT_CLASSES))


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection) -> None:
    ensure_database_exists(conn_factory)

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute(KV_SCHEMA)
        conn.commit()
    finally:
        conn.close()


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in fetchall(cur)]
    finally:
        conn.close()


def try_apply_schema(conn_factory: DatabaseConnection) -> bool:
    """Startup variant of apply_schema that logs instead of raising."""
    try:
        apply_schema(conn_factory)
    except mysql.connector.Error as e:
        logger.error("Could not apply kv_store schema: %s", e)
        return False
    return True
