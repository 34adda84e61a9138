"""Event handlers for domain events."""
from __future__ import annotations

import logging

from nodeloom.domain.events import (
    DomainEventPublisher,
    EdgeAdded,
    EdgeRemoved,
    NodeAdded,
    NodeRemoved,
    UserDeleted,
    UserRegistered,
    WorkspaceCreated,
    WorkspaceDeleted,
)

logger = logging.getLogger(__name__)


class AuditLogHandler:
    """Logs all domain events for audit trail."""

    def handle_user_registered(self, event: UserRegistered) -> None:
        logger.info(f"[AUDIT] User registered: {event.aggregate_id} - {event.username}")

    def handle_user_deleted(self, event: UserDeleted) -> None:
        logger.info(f"[AUDIT] User deleted: {event.aggregate_id}")

    def handle_workspace_created(self, event: WorkspaceCreated) -> None:
        logger.info(f"[AUDIT] Workspace created: {event.aggregate_id} - {event.name}")

    def handle_workspace_deleted(self, event: WorkspaceDeleted) -> None:
        logger.info(f"[AUDIT] Workspace deleted: {event.aggregate_id}")

    def handle_node_added(self, event: NodeAdded) -> None:
        logger.info(
            f"[AUDIT] Node added: {event.aggregate_id} ({event.node_type} '{event.label}') "
            f"in workspace {event.workspace_id}"
        )

    def handle_node_removed(self, event: NodeRemoved) -> None:
        logger.info(f"[AUDIT] Node removed: {event.aggregate_id} from workspace {event.workspace_id}")

    def handle_edge_added(self, event: EdgeAdded) -> None:
        logger.info(
            f"[AUDIT] Edge added: {event.aggregate_id} ({event.source} -> {event.target}) "
            f"in workspace {event.workspace_id}"
        )

    def handle_edge_removed(self, event: EdgeRemoved) -> None:
        logger.info(f"[AUDIT] Edge removed: {event.aggregate_id} from workspace {event.workspace_id}")


def register_event_handlers(publisher: DomainEventPublisher) -> None:
    """Register all event handlers with the publisher."""
    audit = AuditLogHandler()

    publisher.subscribe(UserRegistered, audit.handle_user_registered)
    publisher.subscribe(UserDeleted, audit.handle_user_deleted)
    publisher.subscribe(WorkspaceCreated, audit.handle_workspace_created)
    publisher.subscribe(WorkspaceDeleted, audit.handle_workspace_deleted)
    publisher.subscribe(NodeAdded, audit.handle_node_added)
    publisher.subscribe(NodeRemoved, audit.handle_node_removed)
    publisher.subscribe(EdgeAdded, audit.handle_edge_added)
    publisher.subscribe(EdgeRemoved, audit.handle_edge_removed)
