"""
Dependency wiring for the FastAPI app.

Everything is constructed once by ``build_services`` at startup and kept on
``app.state``; request dependencies only read it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from nodeloom.application.event_handlers import register_event_handlers
from nodeloom.application.user_service import UserService
from nodeloom.application.workspace_service import WorkspaceService
from nodeloom.config import Settings
from nodeloom.domain.errors import AuthenticationError
from nodeloom.domain.events import DomainEventPublisher
from nodeloom.infrastructure.credentials import CredentialsAdapter
from nodeloom.remote.gateway import RemoteStoreGateway
from nodeloom.repositories import EdgeRepository, NodeRepository, UserRepository, WorkspaceRepository


@dataclass(frozen=True)
class Services:
    settings: Settings
    gateway: RemoteStoreGateway
    credentials: CredentialsAdapter
    publisher: DomainEventPublisher
    users: UserService
    workspaces: WorkspaceService


def build_services(settings: Settings, gateway: RemoteStoreGateway | None = None) -> Services:
    if gateway is None:
        gateway = RemoteStoreGateway(
            base_url=settings.REMOTE_STORE_URL,
            api_key=settings.REMOTE_STORE_KEY,
            timeout=settings.REMOTE_STORE_TIMEOUT,
        )

    publisher = DomainEventPublisher()
    register_event_handlers(publisher)

    credentials = CredentialsAdapter(
        secret=settings.TOKEN_SECRET,
        algorithm=settings.TOKEN_ALGORITHM,
        ttl_minutes=settings.TOKEN_TTL_MINUTES,
    )
    return Services(
        settings=settings,
        gateway=gateway,
        credentials=credentials,
        publisher=publisher,
        users=UserService(UserRepository(gateway), credentials, publisher),
        workspaces=WorkspaceService(
            WorkspaceRepository(gateway),
            NodeRepository(gateway),
            EdgeRepository(gateway),
            publisher,
        ),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_settings_dep(services: Services = Depends(get_services)) -> Settings:
    return services.settings


def get_gateway(services: Services = Depends(get_services)) -> RemoteStoreGateway:
    return services.gateway


def get_user_service(services: Services = Depends(get_services)) -> UserService:
    return services.users


def get_workspace_service(services: Services = Depends(get_services)) -> WorkspaceService:
    return services.workspaces


bearer_scheme = HTTPBearer(auto_error=False)


def require_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """Reject the request unless it carries a valid bearer token; return its claims."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")
    return services.credentials.decode_token(credentials.credentials)
