from __future__ import annotations

from typing import List, Optional

from nodeloom.domain.entities import WorkspaceEntity
from nodeloom.remote.query import eq, resource
from nodeloom.repositories.base import RemoteRepository, Row

TABLE = "workspaces"


def to_workspace(row: Row) -> WorkspaceEntity:
    # Children live in their own tables; the row never carries them.
    return WorkspaceEntity(id=str(row["id"]), name=row["name"], nodes=[], edges=[])


class WorkspaceRepository(RemoteRepository):
    """Repository for workspace rows (without their nodes and edges)."""

    entity = "workspace"

    def insert(self, workspace: WorkspaceEntity) -> WorkspaceEntity:
        return to_workspace(self._insert(TABLE, {"id": workspace["id"], "name": workspace["name"]}))

    def list_all(self) -> List[WorkspaceEntity]:
        return [to_workspace(row) for row in self._select(TABLE)]

    def get(self, workspace_id: str) -> Optional[WorkspaceEntity]:
        rows = self._select(resource(TABLE, eq("id", workspace_id)))
        return to_workspace(rows[0]) if rows else None

    def update_name(self, workspace_id: str, name: str) -> Optional[WorkspaceEntity]:
        rows = self._patch(resource(TABLE, eq("id", workspace_id)), {"name": name})
        return to_workspace(rows[0]) if rows else None

    def delete(self, workspace_id: str) -> bool:
        return bool(self._delete(resource(TABLE, eq("id", workspace_id))))
