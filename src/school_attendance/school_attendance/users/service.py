from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..core.constants import CURRENT_USER_KEY
from ..core.enums import Role, parse_role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..database.kv_store import KeyValueStore
from .kv_user_repository import user_from_record, user_to_record
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


DASHBOARD_PATHS: Mapping[Role, str] = {
    Role.ADMIN: "/admin",
    Role.TEACHER: "/teacher",
    Role.PARENT: "/parent",
}


def dashboard_for(role: Role) -> str:
    """Where a user of ``role`` lands after login."""
    try:
        return DASHBOARD_PATHS[role]
    except KeyError:
        raise ValueError(f"No dashboard for role {role!r}")


class IdentitySession:
    """Use case: log in / log out and restore the current user.

    The logged-in user is a single record kept under ``CURRENT_USER_KEY`` in
    the given store. There is no password: a login succeeds when some user
    has exactly that (email, role) pair.
    """

    def __init__(self, users: UserRepository, store: KeyValueStore):
        self._users = users
        self._store = store

    def login(self, email: str, role: Role | str) -> bool:
        parsed = parse_role(role)
        if parsed is None:
            return False

        user = self._users.find_by_email_and_role(email, parsed)
        if not user:
            return False

        self._store.set(CURRENT_USER_KEY, user_to_record(user))
        logger.info("User %s logged in as %s", user.id, user.role.value)
        return True

    def logout(self) -> None:
        self._store.remove(CURRENT_USER_KEY)

    def current_user(self) -> Optional[User]:
        row = self._store.get(CURRENT_USER_KEY)
        if row is None:
            return None
        try:
            return user_from_record(row)
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.warning("Ignoring unreadable session user")
            return None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def require_role(self, *roles: Role) -> User:
        user = self.current_user()
        if user is None:
            raise AuthenticationError("Please log in to continue")
        if roles and user.role not in roles:
            raise AuthorizationError("You do not have permission for this page")
        return user
