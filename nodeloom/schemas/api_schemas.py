"""
API Request/Response Schemas using Pydantic.

Structure of HTTP requests and responses for the NodeLoom API.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from uuid import UUID

from nodeloom.domain.entities import NodeType

# User schemas
class RegisterRequest(BaseModel):
    username: str = Field(..., description="Unique username", min_length=1, max_length=255)
    password: str = Field(..., description="Plaintext password; stored only as a salted hash", min_length=1)
    email: Optional[str] = Field(None, description="Optional email address, usable for login")

class LoginRequest(BaseModel):
    username: str = Field(..., description="Username or email", min_length=1)
    password: str = Field(..., description="Plaintext password", min_length=1)

class LoginResponse(BaseModel):
    token: str = Field(..., description="Signed bearer token")
    token_type: str = Field(default="bearer", description="Authorization scheme to use with the token")

class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, description="New username", min_length=1, max_length=255)
    password: Optional[str] = Field(None, description="New plaintext password", min_length=1)

class User(BaseModel):
    id: str = Field(..., description="Identifier assigned by the remote store")
    username: str = Field(..., description="Unique username")
    email: Optional[str] = Field(None, description="Email address, if any")
    created_at: Optional[str] = Field(None, description="ISO format creation timestamp")

class UserEnvelope(BaseModel):
    user: User

class UserList(BaseModel):
    users: List[User]

# Workspace schemas
class WorkspaceCreate(BaseModel):
    name: str = Field(..., description="Name of the workspace", min_length=1, max_length=255)

class Position(BaseModel):
    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")

class NodeCreate(BaseModel):
    type: NodeType = Field(..., description="Node type: INPUT, OUTPUT or PROCESS")
    label: str = Field(..., description="Display label of the node")
    position: Position = Field(..., description="Position on the canvas")
    data: Dict[str, Any] = Field(default_factory=dict, description="Free-form JSON attributes")

class Node(BaseModel):
    id: str = Field(..., description="Unique identifier for the node")
    workspace_id: str = Field(..., description="ID of the owning workspace")
    type: NodeType = Field(..., description="Node type")
    label: str = Field(..., description="Display label of the node")
    data: Dict[str, Any] = Field(default_factory=dict, description="Free-form JSON attributes")
    position: Position = Field(..., description="Position on the canvas")

class EdgeCreate(BaseModel):
    source: UUID = Field(..., description="ID of the source node")
    target: UUID = Field(..., description="ID of the target node")

class Edge(BaseModel):
    id: str = Field(..., description="Unique identifier for the edge")
    workspace_id: str = Field(..., description="ID of the owning workspace")
    source: str = Field(..., description="ID of the source node")
    target: str = Field(..., description="ID of the target node")

class Workspace(BaseModel):
    id: str = Field(..., description="Unique identifier for the workspace")
    name: str = Field(..., description="Name of the workspace")
    nodes: List[Node] = Field(default_factory=list, description="Nodes in the workspace")
    edges: List[Edge] = Field(default_factory=list, description="Edges connecting nodes")
