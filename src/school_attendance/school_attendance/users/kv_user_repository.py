from __future__ import annotations

from typing import List, Optional

from ..core.constants import USERS_KEY
from ..core.enums import Role
from ..database.collection import CollectionRepository
from ..database.kv_store import KeyValueStore
from .model import User
from .repository import UserRepository


def user_to_record(user: User) -> dict:
    record = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
    }
    if user.phone is not None:
        record["phone"] = user.phone
    return record


def user_from_record(row: dict) -> User:
    return User(
        id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        role=Role(row["role"]),
        phone=row.get("phone"),
    )


class KVUserRepository(UserRepository):
    def __init__(self, store: KeyValueStore):
        self._collection = CollectionRepository(
            store, USERS_KEY, to_record=user_to_record, from_record=user_from_record
        )

    def list_all(self) -> List[User]:
        return self._collection.list_all()

    def add(self, user: User) -> None:
        self._collection.add(user)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._collection.find_by_id(user_id)

    def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        # Exact, case-sensitive email match.
        return self._collection.find_by(lambda u: u.email == email and u.role == role)

    def is_empty(self) -> bool:
        return self._collection.is_empty()
