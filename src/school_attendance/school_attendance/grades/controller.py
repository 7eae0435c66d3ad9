from __future__ import annotations

from flask import Flask, g, jsonify

from ..container import Container
from ..core.constants import DEFAULT_MAX_MARKS
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.auth import json_error, request_data, role_required
from .kv_grade_repository import grade_to_record


def register(app: Flask, container: Container) -> None:
    teacher_required = role_required(container, Role.TEACHER)

    @app.route("/api/teacher/grades", methods=["POST"], endpoint="record_grade")
    @teacher_required
    def record_grade():
        data = request_data()
        try:
            grade = container.grade_service.record_grade(
                student_id=data.get("studentId", ""),
                subject=data.get("subject", ""),
                marks=data.get("marks"),
                max_marks=data.get("maxMarks", DEFAULT_MAX_MARKS),
                teacher_id=g.current_user.id,
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return jsonify({"success": True, "grade": grade_to_record(grade)}), 201

    @app.route("/api/teacher/students/<student_id>/grades", endpoint="student_grades")
    @teacher_required
    def student_grades(student_id: str):
        grades = container.grade_service.grades_for_student(student_id)
        return jsonify({"success": True, "grades": [grade_to_record(gr) for gr in grades]})
