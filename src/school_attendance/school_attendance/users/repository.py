from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete medium.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def add(self, user: User) -> None:
        raise NotImplementedError

    def find_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        raise NotImplementedError

    def is_empty(self) -> bool:
        raise NotImplementedError
