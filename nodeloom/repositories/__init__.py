from .users import UserRepository
from .workspaces import WorkspaceRepository
from .nodes import NodeRepository
from .edges import EdgeRepository

__all__ = ["UserRepository", "WorkspaceRepository", "NodeRepository", "EdgeRepository"]
