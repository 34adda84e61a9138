from __future__ import annotations

from typing import List

from nodeloom.domain.entities import NodeEntity, Position
from nodeloom.remote.query import eq, resource
from nodeloom.repositories.base import RemoteRepository, Row

TABLE = "nodes"


def to_node(row: Row) -> NodeEntity:
    position = row.get("position") or {}
    return NodeEntity(
        id=str(row["id"]),
        workspace_id=str(row["workspace_id"]),
        type=row["type"],
        label=row.get("label") or "",
        data=row.get("data") or {},
        position=Position(x=float(position.get("x", 0.0)), y=float(position.get("y", 0.0))),
    )


class NodeRepository(RemoteRepository):
    """Repository for workspace nodes."""

    entity = "node"

    def insert(self, node: NodeEntity) -> NodeEntity:
        payload = {
            "id": node["id"],
            "workspace_id": node["workspace_id"],
            "type": node["type"],
            "label": node["label"],
            "data": node["data"],
            "position": {"x": node["position"]["x"], "y": node["position"]["y"]},
        }
        return to_node(self._insert(TABLE, payload))

    def list_for_workspace(self, workspace_id: str) -> List[NodeEntity]:
        return [to_node(row) for row in self._select(resource(TABLE, eq("workspace_id", workspace_id)))]

    def delete(self, workspace_id: str, node_id: str) -> bool:
        return bool(self._delete(resource(TABLE, eq("id", node_id), eq("workspace_id", workspace_id))))
