"""Domain error hierarchy for clean exception handling."""
from __future__ import annotations


class DomainError(Exception):
    """Base for all domain errors."""


class ConfigurationError(DomainError):
    """Missing or invalid startup configuration."""


class NotFoundError(DomainError):
    """Resource not found."""


class WorkspaceNotFound(NotFoundError):
    """No workspace row matched the identifier."""

    def __init__(self, workspace_id: str) -> None:
        super().__init__(f"Workspace not found: {workspace_id}")
        self.workspace_id = workspace_id


class ValidationError(DomainError):
    """Invalid input or state."""


class ConflictError(DomainError):
    """Resource conflict (e.g., duplicate username)."""


class AuthenticationError(DomainError):
    """Missing, invalid or expired credentials."""


class UpstreamError(DomainError):
    """Remote store answered with an unexpected status or body.

    The upstream status and body are kept for logging only; they are never
    sent back to API clients.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(DomainError):
    """Network failure or timeout while talking to the remote store."""
