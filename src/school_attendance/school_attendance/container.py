from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .classes.kv_class_repository import KVClassRepository
from .classes.service import ClassService
from .database.bootstrap import initialize_storage, try_apply_schema
from .database.connection import DatabaseConnection, db_config_from_dict
from .database.kv_store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore, MySQLKeyValueStore
from .grades.kv_grade_repository import KVGradeRepository
from .grades.service import GradeService
from .notifications.service import NotificationService
from .reports.service import ParentReportService
from .students.kv_student_repository import KVStudentRepository
from .students.service import StudentService
from .teachers.kv_teacher_repository import KVTeacherRepository
from .teachers.service import TeacherService
from .users.kv_user_repository import KVUserRepository
from .users.service import IdentitySession

STORAGE_BACKENDS = ("memory", "file", "mysql")


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    users_repo: KVUserRepository
    teachers_repo: KVTeacherRepository
    students_repo: KVStudentRepository
    classes_repo: KVClassRepository
    attendance_repo: KVAttendanceRepository
    grades_repo: KVGradeRepository

    teacher_service: TeacherService
    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    grade_service: GradeService
    report_service: ParentReportService
    notification_service: NotificationService

    def open_session(self, session_store: Optional[KeyValueStore] = None) -> IdentitySession:
        """Identity session over ``session_store`` (defaults to the records store)."""
        return IdentitySession(self.users_repo, session_store if session_store is not None else self.store)

    def initialize_storage(self) -> None:
        initialize_storage(self.users_repo, self.teachers_repo, self.classes_repo)


def build_store(
    backend: str,
    *,
    storage_path: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> KeyValueStore:
    if backend == "memory":
        return MemoryKeyValueStore()

    if backend == "file":
        if not storage_path:
            raise ValueError("STORAGE_PATH is required for the file backend")
        return JsonFileKeyValueStore(storage_path)

    if backend == "mysql":
        conn = DatabaseConnection.get_instance(db_config_from_dict(db_config or {}))
        if auto_init_db:
            try_apply_schema(conn)
        return MySQLKeyValueStore(conn)

    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {STORAGE_BACKENDS}")


def build_container(*, store: KeyValueStore) -> Container:
    users_repo = KVUserRepository(store)
    teachers_repo = KVTeacherRepository(store, users_repo)
    students_repo = KVStudentRepository(store)
    classes_repo = KVClassRepository(store)
    attendance_repo = KVAttendanceRepository(store)
    grades_repo = KVGradeRepository(store)

    return Container(
        store=store,
        users_repo=users_repo,
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        grades_repo=grades_repo,
        teacher_service=TeacherService(teachers_repo),
        class_service=ClassService(classes_repo),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        grade_service=GradeService(grades_repo, students_repo),
        report_service=ParentReportService(students_repo, attendance_repo, grades_repo),
        notification_service=NotificationService(),
    )
