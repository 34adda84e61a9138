"""Internal domain entities as TypedDicts for type safety at boundaries."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, TypedDict


class NodeType(str, Enum):
    INPUT = "INPUT"
    OUTPUT = "OUTPUT"
    PROCESS = "PROCESS"


class Position(TypedDict):
    x: float
    y: float


class UserEntity(TypedDict):
    id: str
    username: str
    email: str | None
    created_at: str | None


class UserRecord(UserEntity):
    """User row including the stored password hash. Never leaves the service layer."""
    password: str


class NodeEntity(TypedDict):
    id: str
    workspace_id: str
    type: str
    label: str
    data: Dict[str, Any]
    position: Position


class EdgeEntity(TypedDict):
    id: str
    workspace_id: str
    source: str
    target: str


class WorkspaceEntity(TypedDict):
    id: str
    name: str
    nodes: List[NodeEntity]
    edges: List[EdgeEntity]
