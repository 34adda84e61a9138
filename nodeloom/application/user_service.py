"""Service for user registration, login and account management."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from nodeloom.domain.entities import UserEntity
from nodeloom.domain.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from nodeloom.domain.events import DomainEventPublisher, UserDeleted, UserRegistered
from nodeloom.infrastructure.credentials import CredentialsAdapter
from nodeloom.repositories import UserRepository


class UserService:
    """Orchestrates user accounts. Plaintext passwords never leave this class."""

    def __init__(
        self,
        users: UserRepository,
        credentials: CredentialsAdapter,
        publisher: DomainEventPublisher,
    ) -> None:
        self._users = users
        self._credentials = credentials
        self._publisher = publisher

    @staticmethod
    def validate_username(username: str) -> str:
        if not username or not username.strip():
            raise ValidationError("Username is required and cannot be empty")
        return username.strip()

    @staticmethod
    def validate_password(password: str) -> str:
        if not password:
            raise ValidationError("Password is required and cannot be empty")
        return password

    def register(self, username: str, password: str, email: Optional[str] = None) -> UserEntity:
        username = self.validate_username(username)
        password = self.validate_password(password)
        if self._users.find_by_username(username):
            raise ConflictError(f"Username '{username}' is already taken")

        user = self._users.insert(username, self._credentials.hash_password(password), email=email)
        self._publisher.publish(UserRegistered(user["id"], username=user["username"]))
        return user

    def login(self, identifier: str, password: str) -> str:
        """Verify credentials and return a signed bearer token."""
        if not identifier or not password:
            raise AuthenticationError("Invalid username or password")
        for record in self._users.find_by_username_or_email(identifier.strip()):
            if self._credentials.verify_password(password, record["password"]):
                return self._credentials.issue_token(record["id"], record["username"])
        raise AuthenticationError("Invalid username or password")

    def list_users(self) -> List[UserEntity]:
        return self._users.list_all()

    def get_user(self, user_id: str) -> UserEntity:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")
        return user

    def update_user(
        self, user_id: str, username: Optional[str] = None, password: Optional[str] = None
    ) -> UserEntity:
        fields: Dict[str, Any] = {}
        if username is not None:
            username = self.validate_username(username)
            for other in self._users.find_by_username(username):
                if other["id"] != user_id:
                    raise ConflictError(f"Username '{username}' is already taken")
            fields["username"] = username
        if password is not None:
            fields["password"] = self._credentials.hash_password(self.validate_password(password))
        if not fields:
            raise ValidationError("Nothing to update: provide a username or a password")

        updated = self._users.update(user_id, fields)
        if updated is None:
            raise NotFoundError(f"User not found: {user_id}")
        return updated

    def delete_user(self, user_id: str) -> None:
        if self._users.delete(user_id):
            self._publisher.publish(UserDeleted(user_id))
