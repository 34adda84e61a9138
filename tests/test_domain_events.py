"""Tests for domain events and event handling."""
from __future__ import annotations

import logging
from datetime import datetime
from unittest.mock import Mock

from nodeloom.application.event_handlers import register_event_handlers
from nodeloom.domain.events import (
    DomainEventPublisher,
    NodeAdded,
    WorkspaceCreated,
    WorkspaceDeleted,
)


class TestDomainEvent:
    """Test base domain event functionality."""

    def test_defaults_are_generated(self):
        event = WorkspaceCreated("w1", name="Demo")

        assert event.aggregate_id == "w1"
        assert event.name == "Demo"
        assert event.event_id
        assert isinstance(event.timestamp, datetime)

    def test_event_ids_are_unique(self):
        assert WorkspaceDeleted("w1").event_id != WorkspaceDeleted("w1").event_id


class TestDomainEventPublisher:
    """Test publish/subscribe."""

    def test_publish_to_subscribers_of_type(self):
        publisher = DomainEventPublisher()
        created, deleted = Mock(), Mock()
        publisher.subscribe(WorkspaceCreated, created)
        publisher.subscribe(WorkspaceDeleted, deleted)

        event = WorkspaceCreated("w1", name="Demo")
        publisher.publish(event)

        created.assert_called_once_with(event)
        deleted.assert_not_called()

    def test_handler_failure_does_not_propagate(self):
        publisher = DomainEventPublisher()
        failing = Mock(side_effect=RuntimeError("handler broke"))
        after = Mock()
        publisher.subscribe(WorkspaceDeleted, failing)
        publisher.subscribe(WorkspaceDeleted, after)

        publisher.publish(WorkspaceDeleted("w1"))

        after.assert_called_once()

    def test_publishers_are_independent(self):
        first, second = DomainEventPublisher(), DomainEventPublisher()
        handler = Mock()
        first.subscribe(WorkspaceDeleted, handler)

        second.publish(WorkspaceDeleted("w1"))

        handler.assert_not_called()

    def test_clear_subscribers(self):
        publisher = DomainEventPublisher()
        handler = Mock()
        publisher.subscribe(WorkspaceDeleted, handler)
        publisher.clear_subscribers()

        publisher.publish(WorkspaceDeleted("w1"))

        handler.assert_not_called()


class TestAuditLog:
    """Test audit handlers registered on a publisher."""

    def test_audit_lines_logged(self, caplog):
        publisher = DomainEventPublisher()
        register_event_handlers(publisher)

        with caplog.at_level(logging.INFO, logger="nodeloom.application.event_handlers"):
            publisher.publish(WorkspaceCreated("w1", name="Demo"))
            publisher.publish(NodeAdded("n1", workspace_id="w1", node_type="INPUT", label="Start"))

        assert "[AUDIT] Workspace created: w1 - Demo" in caplog.text
        assert "[AUDIT] Node added: n1 (INPUT 'Start') in workspace w1" in caplog.text
