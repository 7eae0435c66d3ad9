"""Example: using the service layer without Flask.

Goal: show that controllers are a thin layer and the use cases live in services.
"""

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.database.kv_store import MemoryKeyValueStore


def main():
    container = build_container(store=MemoryKeyValueStore())
    container.initialize_storage()

    session = container.open_session()
    print("login:", session.login("teacher@school.com", "teacher"))
    teacher = session.current_user()

    student = container.student_service.register_student(
        student_code="S001",
        name="Alex Johnson",
        class_name="Grade 10-A",
        parent_name="Sarah Johnson",
        parent_email="parent@school.com",
        teacher_id=teacher.id,
    )
    for status in ("Present", "Present", "Absent", "Present"):
        container.attendance_service.mark(student_id=student.id, teacher_id=teacher.id, status=status)
    for subject, marks in (("Mathematics", 85), ("Science", 92), ("English", 78), ("History", 88)):
        container.grade_service.record_grade(student_id=student.id, subject=subject, marks=marks, teacher_id=teacher.id)

    report = container.report_service.build_report("parent@school.com")
    print("attendance:", report.attendance_percentage, "average:", report.average_grade)


if __name__ == "__main__":
    main()
