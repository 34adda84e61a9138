"""Tests for password hashing and bearer tokens."""
from __future__ import annotations

import pytest

from nodeloom.domain.errors import AuthenticationError, ValidationError
from nodeloom.infrastructure.credentials import CredentialsAdapter


class TestPasswordHashing:
    """Test bcrypt hashing."""

    def test_hash_is_salted_and_verifiable(self):
        adapter = CredentialsAdapter(secret="s")

        first = adapter.hash_password("secret")
        second = adapter.hash_password("secret")

        assert first != "secret"
        assert first != second
        assert adapter.verify_password("secret", first)
        assert not adapter.verify_password("Secret", first)

    def test_verify_against_non_hash(self):
        adapter = CredentialsAdapter(secret="s")
        assert adapter.verify_password("secret", "secret") is False
        assert adapter.verify_password("secret", "") is False

    def test_overlong_password_rejected(self):
        with pytest.raises(ValidationError):
            CredentialsAdapter(secret="s").hash_password("x" * 73)


class TestTokens:
    """Test JWT issuing and verification."""

    def test_round_trip_claims(self):
        adapter = CredentialsAdapter(secret="s")

        claims = adapter.decode_token(adapter.issue_token("u1", "alice"))

        assert claims["sub"] == "u1"
        assert claims["username"] == "alice"
        assert claims["exp"] > claims["iat"]

    def test_wrong_secret(self):
        token = CredentialsAdapter(secret="one").issue_token("u1", "alice")
        with pytest.raises(AuthenticationError, match="Invalid token"):
            CredentialsAdapter(secret="two").decode_token(token)

    def test_expired_token(self):
        token = CredentialsAdapter(secret="s", ttl_minutes=-1).issue_token("u1", "alice")
        with pytest.raises(AuthenticationError, match="expired"):
            CredentialsAdapter(secret="s").decode_token(token)

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError):
            CredentialsAdapter(secret="s").decode_token("not-a-jwt")
