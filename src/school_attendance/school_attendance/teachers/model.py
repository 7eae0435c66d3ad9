from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Role
from ..users.model import User


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher, which doubles as a login identity.

    ``teacher_code`` is the human-facing staff number (e.g. ``T001``),
    distinct from the internal ``id``.
    """

    id: str
    teacher_code: str
    name: str
    email: str
    phone: Optional[str] = None
    role: Role = field(default=Role.TEACHER, init=False)

    def as_user(self) -> User:
        return User(id=self.id, name=self.name, email=self.email, role=self.role, phone=self.phone)
