from __future__ import annotations

from flask import Flask, g, jsonify, request, send_file

from ..attendance.kv_attendance_repository import attendance_to_record
from ..attendance.qr import render_qr_png, student_qr_payload
from ..classes.kv_class_repository import class_to_record
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.auth import json_error, request_data, role_required
from .kv_student_repository import student_to_record


def register(app: Flask, container: Container) -> None:
    teacher_required = role_required(container, Role.TEACHER)

    @app.route("/teacher", endpoint="teacher_dashboard")
    @teacher_required
    def teacher_dashboard():
        students = container.student_service.list_students()
        today = container.attendance_service.today_records()
        return jsonify(
            {
                "success": True,
                "students": [student_to_record(s) for s in students],
                "classes": [class_to_record(c) for c in container.class_service.list_classes()],
                "today": [attendance_to_record(r) for r in today],
                "todayCount": len(today),
            }
        )

    @app.route("/api/teacher/students", endpoint="teacher_students")
    @teacher_required
    def teacher_students():
        class_name = request.args.get("class")
        if class_name:
            students = container.student_service.list_by_class(class_name)
        else:
            students = container.student_service.list_students()
        return jsonify({"success": True, "students": [student_to_record(s) for s in students]})

    @app.route("/api/teacher/students", methods=["POST"], endpoint="add_student")
    @teacher_required
    def add_student():
        data = request_data()
        try:
            student = container.student_service.register_student(
                student_code=data.get("studentId", ""),
                name=data.get("name", ""),
                class_name=data.get("class", ""),
                parent_name=data.get("parentName", ""),
                parent_email=data.get("parentEmail", ""),
                parent_phone=data.get("parentPhone", ""),
                teacher_id=g.current_user.id,
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{student.name} has been added successfully",
                    "student": student_to_record(student),
                }
            ),
            201,
        )

    @app.route("/api/teacher/students/<student_id>/qr", endpoint="student_qr_image")
    @teacher_required
    def student_qr_image(student_id: str):
        """PNG QR code a teacher scans to mark this student present."""
        student = container.student_service.get_student(student_id)
        if not student:
            return json_error("Student not found", 404)
        return send_file(render_qr_png(student_qr_payload(student.id)), mimetype="image/png")

    @app.route("/api/teacher/notify", methods=["POST"], endpoint="notify_parent")
    @teacher_required
    def notify_parent():
        data = request_data()
        student = container.student_service.get_student(data.get("studentId", ""))
        if not student:
            return json_error("Student not found", 404)

        try:
            notification = container.notification_service.notify_parent(
                student, channel=data.get("channel", "email")
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return jsonify(
            {
                "success": True,
                "channel": notification.channel,
                "recipient": notification.recipient,
                "message": notification.message,
            }
        )
