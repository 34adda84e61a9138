from __future__ import annotations

from typing import Any, Dict, List, Optional

from nodeloom.domain.entities import UserEntity, UserRecord
from nodeloom.remote.query import cond, eq, or_, resource
from nodeloom.repositories.base import RemoteRepository, Row

TABLE = "users"


def to_user(row: Row) -> UserEntity:
    """Map a users row to the public entity. The password hash is dropped."""
    return UserEntity(
        id=str(row["id"]),
        username=row["username"],
        email=row.get("email"),
        created_at=row.get("created_at"),
    )


def to_record(row: Row) -> UserRecord:
    return UserRecord(**to_user(row), password=row.get("password") or "")


class UserRepository(RemoteRepository):
    """Repository for user accounts."""

    entity = "user"

    def insert(self, username: str, password_hash: str, email: Optional[str] = None) -> UserEntity:
        """
        Insert a user. The id and creation timestamp are assigned by the store.

        Args:
            username: Unique username
            password_hash: Salted hash; the plaintext never reaches this layer
            email: Optional email address

        Returns:
            The stored user without its password
        """
        payload: Dict[str, Any] = {"username": username, "password": password_hash}
        if email:
            payload["email"] = email
        return to_user(self._insert(TABLE, payload))

    def list_all(self) -> List[UserEntity]:
        return [to_user(row) for row in self._select(TABLE)]

    def get(self, user_id: str) -> Optional[UserEntity]:
        rows = self._select(resource(TABLE, eq("id", user_id)))
        return to_user(rows[0]) if rows else None

    def find_by_username(self, username: str) -> List[UserEntity]:
        return [to_user(row) for row in self._select(resource(TABLE, eq("username", username)))]

    def find_by_username_or_email(self, identifier: str) -> List[UserRecord]:
        """Return matching rows including the stored hash, for credential checks."""
        path = resource(TABLE, or_(cond("username", identifier), cond("email", identifier)))
        return [to_record(row) for row in self._select(path)]

    def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[UserEntity]:
        """Patch only the given fields. Returns None when no row matched."""
        rows = self._patch(resource(TABLE, eq("id", user_id)), fields)
        return to_user(rows[0]) if rows else None

    def delete(self, user_id: str) -> bool:
        return bool(self._delete(resource(TABLE, eq("id", user_id))))
