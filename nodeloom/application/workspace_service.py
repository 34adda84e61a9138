"""Workspace-level operations composed from several repository calls.

The remote store has no foreign-key cascade and no multi-table fetch, so a
workspace with its graph is assembled here from three independent reads.
None of the composite operations is atomic: a failure part way through leaves
earlier steps applied and is reported as a plain error on the failing step.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from nodeloom.domain.entities import (
    EdgeEntity,
    NodeEntity,
    NodeType,
    Position,
    WorkspaceEntity,
)
from nodeloom.domain.errors import ValidationError, WorkspaceNotFound
from nodeloom.domain.events import (
    DomainEventPublisher,
    EdgeAdded,
    EdgeRemoved,
    NodeAdded,
    NodeRemoved,
    WorkspaceCreated,
    WorkspaceDeleted,
)
from nodeloom.repositories import EdgeRepository, NodeRepository, WorkspaceRepository

logger = logging.getLogger(__name__)


class WorkspaceService:
    """Application service for workspaces and their nodes and edges."""

    def __init__(
        self,
        workspaces: WorkspaceRepository,
        nodes: NodeRepository,
        edges: EdgeRepository,
        publisher: DomainEventPublisher,
    ) -> None:
        self._workspaces = workspaces
        self._nodes = nodes
        self._edges = edges
        self._publisher = publisher

    @staticmethod
    def validate_name(name: str) -> str:
        """Validate and normalize workspace name."""
        if not name or not name.strip():
            raise ValidationError("Workspace name is required and cannot be empty")
        return name.strip()

    def create_workspace(self, name: str) -> WorkspaceEntity:
        name = self.validate_name(name)
        # Id is allocated before the insert; a failed insert simply discards it.
        workspace = WorkspaceEntity(id=str(uuid.uuid4()), name=name, nodes=[], edges=[])
        created = self._workspaces.insert(workspace)
        self._publisher.publish(WorkspaceCreated(created["id"], name=created["name"]))
        return created

    def list_workspaces(self) -> List[WorkspaceEntity]:
        return self._workspaces.list_all()

    def get_workspace(self, workspace_id: str) -> WorkspaceEntity:
        """
        Fetch a workspace together with its nodes and edges.

        The three reads are sequential and not isolated from concurrent writes,
        so the result may mix states.

        Raises:
            WorkspaceNotFound: no workspace row has this id
        """
        workspace = self._workspaces.get(workspace_id)
        if workspace is None:
            raise WorkspaceNotFound(workspace_id)
        workspace["nodes"] = self._nodes.list_for_workspace(workspace_id)
        workspace["edges"] = self._edges.list_for_workspace(workspace_id)
        return workspace

    def update_workspace(self, workspace_id: str, name: str) -> WorkspaceEntity:
        """Rename a workspace. Only the name is patched."""
        name = self.validate_name(name)
        updated = self._workspaces.update_name(workspace_id, name)
        if updated is None:
            raise WorkspaceNotFound(workspace_id)
        return updated

    def delete_workspace(self, workspace_id: str) -> None:
        """Delete the workspace row.

        Nodes and edges that reference the workspace are left in place.
        Deleting a workspace that does not exist is not an error.
        """
        if not self._workspaces.delete(workspace_id):
            logger.debug(f"Workspace {workspace_id} not deleted: no such row")
            return
        logger.info(f"Workspace {workspace_id} deleted; its nodes and edges are not removed")
        self._publisher.publish(WorkspaceDeleted(workspace_id))

    def add_node(
        self,
        workspace_id: str,
        node_type: NodeType | str,
        label: str,
        position: Position,
        data: Optional[Dict[str, Any]] = None,
    ) -> NodeEntity:
        try:
            node_type = NodeType(node_type)
        except ValueError as exc:
            allowed = ", ".join(t.value for t in NodeType)
            raise ValidationError(f"Node type must be one of: {allowed}") from exc

        node = NodeEntity(
            id=str(uuid.uuid4()),
            workspace_id=workspace_id,
            type=node_type.value,
            label=label,
            data=dict(data or {}),
            position=Position(x=float(position["x"]), y=float(position["y"])),
        )
        created = self._nodes.insert(node)
        self._publisher.publish(
            NodeAdded(created["id"], workspace_id=workspace_id, node_type=created["type"], label=created["label"])
        )
        return created

    def remove_node(self, workspace_id: str, node_id: str) -> None:
        if self._nodes.delete(workspace_id, node_id):
            self._publisher.publish(NodeRemoved(node_id, workspace_id=workspace_id))

    def add_edge(self, workspace_id: str, source: str, target: str) -> EdgeEntity:
        edge = EdgeEntity(
            id=str(uuid.uuid4()),
            workspace_id=workspace_id,
            source=source,
            target=target,
        )
        created = self._edges.insert(edge)
        self._publisher.publish(EdgeAdded(created["id"], workspace_id=workspace_id, source=source, target=target))
        return created

    def remove_edge(self, workspace_id: str, edge_id: str) -> None:
        if self._edges.delete(workspace_id, edge_id):
            self._publisher.publish(EdgeRemoved(edge_id, workspace_id=workspace_id))
