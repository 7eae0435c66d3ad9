from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.auth import json_error, request_data, role_required
from .kv_class_repository import class_to_record


def register(app: Flask, container: Container) -> None:
    admin_required = role_required(container, Role.ADMIN)

    @app.route("/api/admin/classes", endpoint="admin_classes")
    @role_required(container, Role.ADMIN, Role.TEACHER)
    def admin_classes():
        classes = container.class_service.list_classes()
        return jsonify({"success": True, "classes": [class_to_record(c) for c in classes]})

    @app.route("/api/admin/classes", methods=["POST"], endpoint="add_class")
    @admin_required
    def add_class():
        data = request_data()
        subjects = data.get("subjects") or []
        if isinstance(subjects, str):
            subjects = subjects.split(",")

        try:
            school_class = container.class_service.add_class(
                name=data.get("name", ""),
                subjects=subjects,
                teacher_id=data.get("teacherId"),
            )
        except ValidationError as e:
            return json_error(str(e), 400)

        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{school_class.name} has been created successfully",
                    "class": class_to_record(school_class),
                }
            ),
            201,
        )
