from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..database.flask_session_store import FlaskSessionStore
from .service import IdentitySession


def identity(container) -> IdentitySession:
    """Identity session of the current request, kept in the session cookie."""
    if "identity" not in g:
        g.identity = container.open_session(FlaskSessionStore())
    return g.identity


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def request_data() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def role_required(container, *roles: Role):
    """Only let through a logged-in user having one of ``roles`` (any role if none given)."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.current_user = identity(container).require_role(*roles)
            except AuthenticationError as e:
                return json_error(str(e), 401)
            except AuthorizationError as e:
                return json_error(str(e), 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def login_required(container):
    return role_required(container)
