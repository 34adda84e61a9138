"""Domain events for decoupled side effects such as the audit log."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List
from uuid import uuid4

logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    """Base class for all domain events."""
    aggregate_id: str
    event_id: str = field(default_factory=lambda: str(uuid4()), kw_only=True)
    timestamp: datetime = field(default_factory=datetime.now, kw_only=True)


@dataclass
class UserRegistered(DomainEvent):
    """Raised when a new user account is stored."""
    username: str


@dataclass
class UserDeleted(DomainEvent):
    """Raised when a user account is removed."""


@dataclass
class WorkspaceCreated(DomainEvent):
    """Raised when a new, empty workspace is stored."""
    name: str


@dataclass
class WorkspaceDeleted(DomainEvent):
    """Raised when a workspace row is deleted. Its nodes and edges are not."""


@dataclass
class NodeAdded(DomainEvent):
    """Raised when a node is inserted into a workspace."""
    workspace_id: str
    node_type: str
    label: str


@dataclass
class NodeRemoved(DomainEvent):
    workspace_id: str


@dataclass
class EdgeAdded(DomainEvent):
    """Raised when an edge is inserted into a workspace."""
    workspace_id: str
    source: str
    target: str


@dataclass
class EdgeRemoved(DomainEvent):
    workspace_id: str


class DomainEventPublisher:
    """Dispatches events to subscribed handlers.

    One publisher is built at startup and handed to the services that need it.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[type, List[Callable[[DomainEvent], None]]] = {}

    def subscribe(self, event_type: type[DomainEvent], handler: Callable[[DomainEvent], None]) -> None:
        """Subscribe a handler to an event type."""
        self._subscribers.setdefault(event_type, []).append(handler)

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        for handler in self._subscribers.get(type(event), []):
            try:
                handler(event)
            except Exception:
                # Log error but don't fail the main operation
                logger.exception(f"Event handler error for {type(event).__name__}")

    def clear_subscribers(self) -> None:
        """Clear all subscribers (useful for testing)."""
        self._subscribers = {}
