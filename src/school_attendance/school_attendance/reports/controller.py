from __future__ import annotations

from flask import Flask, g, jsonify

from ..attendance.kv_attendance_repository import attendance_to_record
from ..container import Container
from ..core.enums import Role
from ..grades.kv_grade_repository import grade_to_record
from ..students.kv_student_repository import student_to_record
from ..users.auth import json_error, role_required


def register(app: Flask, container: Container) -> None:
    parent_required = role_required(container, Role.PARENT)

    @app.route("/parent", endpoint="parent_dashboard")
    @app.route("/api/parent/report", endpoint="parent_report")
    @parent_required
    def parent_report():
        user = g.current_user
        container.report_service.ensure_demo_data(user.name, user.email)
        report = container.report_service.build_report(user.email)
        if report is None:
            return json_error("No student information available", 404)

        return jsonify(
            {
                "success": True,
                "student": student_to_record(report.student),
                "attendance": [attendance_to_record(r) for r in report.attendance],
                "grades": [
                    dict(grade_to_record(row.grade), percentage=row.percentage, band=row.band)
                    for row in report.grades
                ],
                "presentCount": report.present_count,
                "absentCount": report.absent_count,
                "attendancePercentage": report.attendance_percentage,
                "averageGrade": report.average_grade,
            }
        )
