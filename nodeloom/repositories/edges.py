from __future__ import annotations

from typing import List

from nodeloom.domain.entities import EdgeEntity
from nodeloom.remote.query import eq, resource
from nodeloom.repositories.base import RemoteRepository, Row

TABLE = "edges"


def to_edge(row: Row) -> EdgeEntity:
    return EdgeEntity(
        id=str(row["id"]),
        workspace_id=str(row["workspace_id"]),
        source=str(row["source"]),
        target=str(row["target"]),
    )


class EdgeRepository(RemoteRepository):
    """Repository for workspace edges. Endpoints are not checked for existence."""

    entity = "edge"

    def insert(self, edge: EdgeEntity) -> EdgeEntity:
        return to_edge(self._insert(TABLE, dict(edge)))

    def list_for_workspace(self, workspace_id: str) -> List[EdgeEntity]:
        return [to_edge(row) for row in self._select(resource(TABLE, eq("workspace_id", workspace_id)))]

    def delete(self, workspace_id: str, edge_id: str) -> bool:
        return bool(self._delete(resource(TABLE, eq("id", edge_id), eq("workspace_id", workspace_id))))
