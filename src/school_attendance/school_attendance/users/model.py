from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Login identity is the (email, role) pair, not ``id``.
    """

    id: str
    name: str
    email: str
    role: Role
    phone: Optional[str] = None
