from __future__ import annotations

from flask import Flask, jsonify

from ..classes.kv_class_repository import class_to_record
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.auth import json_error, request_data, role_required
from .kv_teacher_repository import teacher_to_record


def register(app: Flask, container: Container) -> None:
    admin_required = role_required(container, Role.ADMIN)

    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        teachers = container.teacher_service.list_teachers()
        classes = container.class_service.list_classes()
        return jsonify(
            {
                "success": True,
                "teachers": [teacher_to_record(t) for t in teachers],
                "classes": [class_to_record(c) for c in classes],
            }
        )

    @app.route("/api/admin/teachers", endpoint="admin_teachers")
    @admin_required
    def admin_teachers():
        teachers = container.teacher_service.list_teachers()
        return jsonify({"success": True, "teachers": [teacher_to_record(t) for t in teachers]})

    @app.route("/api/admin/teachers", methods=["POST"], endpoint="add_teacher")
    @admin_required
    def add_teacher():
        data = request_data()
        try:
            teacher = container.teacher_service.add_teacher(
                teacher_code=data.get("teacherId", ""),
                name=data.get("name", ""),
                email=data.get("email", ""),
                phone=data.get("phone", ""),
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{teacher.name} has been added successfully",
                    "teacher": teacher_to_record(teacher),
                }
            ),
            201,
        )
