"""Adapter for password hashing (bcrypt) and bearer tokens (PyJWT)."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from nodeloom.domain.errors import AuthenticationError, ValidationError

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


class CredentialsAdapter:
    """Hashes passwords and issues/verifies signed bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_minutes: int = 60) -> None:
        """
        Args:
            secret: Key used to sign tokens
            algorithm: JWT signing algorithm
            ttl_minutes: Token lifetime
        """
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=ttl_minutes)

    def hash_password(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False

    def issue_token(self, user_id: str, username: str) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": user_id,
            "username": username,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a bearer token and return its claims.

        Raises:
            AuthenticationError: token is malformed, badly signed or expired
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid token") from exc
