from __future__ import annotations

from flask import Flask, g, jsonify

from ..container import Container
from ..core.enums import parse_role
from .auth import identity, json_error, login_required, request_data
from .kv_user_repository import user_to_record
from .service import dashboard_for


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()
        email = data.get("email") or ""
        role = data.get("role") or ""

        if not email or not role:
            return json_error("Please fill in all fields", 400)

        session = identity(container)
        if not session.login(email, role):
            return json_error("Invalid credentials or user not found", 401)

        user = session.current_user()
        return jsonify(
            {
                "success": True,
                "message": "Welcome back!",
                "user": user_to_record(user),
                "redirect": dashboard_for(parse_role(role)),
            }
        )

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        identity(container).logout()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/api/me", endpoint="me")
    @login_required(container)
    def me():
        user = g.current_user
        return jsonify({"success": True, "user": user_to_record(user), "redirect": dashboard_for(user.role)})
