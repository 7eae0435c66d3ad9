from __future__ import annotations

from flask import Flask, g, jsonify

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.auth import json_error, request_data, role_required
from .kv_attendance_repository import attendance_to_record


def register(app: Flask, container: Container) -> None:
    teacher_required = role_required(container, Role.TEACHER)

    @app.route("/api/teacher/attendance", endpoint="attendance_records")
    @teacher_required
    def attendance_records():
        records = container.attendance_service.all_records()
        return jsonify({"success": True, "records": [attendance_to_record(r) for r in records]})

    @app.route("/api/teacher/attendance", methods=["POST"], endpoint="mark_attendance")
    @teacher_required
    def mark_attendance():
        data = request_data()
        try:
            record = container.attendance_service.mark(
                student_id=data.get("studentId", ""),
                teacher_id=g.current_user.id,
                status=data.get("status") or "Present",
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{record.student_name} marked as {record.status.value.lower()}",
                    "record": attendance_to_record(record),
                }
            ),
            201,
        )

    @app.route("/api/teacher/attendance/scan", methods=["POST"], endpoint="scan_attendance")
    @teacher_required
    def scan_attendance():
        """Mark a student present from a scanned QR payload."""
        data = request_data()
        try:
            record = container.attendance_service.mark_from_qr(
                str(data.get("qr_code", "")), teacher_id=g.current_user.id
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{record.student_name} marked as present",
                    "record": attendance_to_record(record),
                }
            ),
            201,
        )
