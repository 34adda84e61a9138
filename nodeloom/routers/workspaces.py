from uuid import UUID

from fastapi import APIRouter, Depends, Response
from typing import List

from nodeloom.schemas.api_schemas import Edge, EdgeCreate, Node, NodeCreate, Workspace, WorkspaceCreate
from nodeloom.dependencies import get_workspace_service, require_token
from nodeloom.application.workspace_service import WorkspaceService

router = APIRouter(prefix="/workspaces", dependencies=[Depends(require_token)])

@router.post("", response_model=Workspace, status_code=201)
def create_workspace(
    workspace_data: WorkspaceCreate,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Create a new, empty workspace.
    """
    return service.create_workspace(workspace_data.name)

@router.get("", response_model=List[Workspace])
def get_workspaces(service: WorkspaceService = Depends(get_workspace_service)):
    """
    Retrieve all workspaces (without their nodes and edges).
    """
    return service.list_workspaces()

@router.get("/{workspace_id}", response_model=Workspace)
def get_workspace(
    workspace_id: UUID,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Get a workspace with its nodes and edges.
    """
    return service.get_workspace(str(workspace_id))

@router.put("/{workspace_id}", response_model=Workspace)
def update_workspace(
    workspace_id: UUID,
    workspace_data: WorkspaceCreate,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Rename a workspace.
    """
    return service.update_workspace(str(workspace_id), workspace_data.name)

@router.delete("/{workspace_id}", status_code=204)
def delete_workspace(
    workspace_id: UUID,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Delete a workspace. Its nodes and edges are left in place.
    """
    service.delete_workspace(str(workspace_id))
    return Response(status_code=204)

# Node operations
@router.post("/{workspace_id}/nodes", response_model=Node, status_code=201)
def add_node(
    workspace_id: UUID,
    node_data: NodeCreate,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Add a node to a workspace.
    """
    return service.add_node(
        str(workspace_id),
        node_data.type,
        node_data.label,
        node_data.position.model_dump(),
        data=node_data.data,
    )

@router.delete("/{workspace_id}/nodes/{node_id}", status_code=204)
def remove_node(
    workspace_id: UUID,
    node_id: UUID,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Remove a node from a workspace.
    """
    service.remove_node(str(workspace_id), str(node_id))
    return Response(status_code=204)

# Edge operations
@router.post("/{workspace_id}/edges", response_model=Edge, status_code=201)
def add_edge(
    workspace_id: UUID,
    edge_data: EdgeCreate,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Connect two nodes of a workspace. Endpoints are not checked for existence.
    """
    return service.add_edge(str(workspace_id), str(edge_data.source), str(edge_data.target))

@router.delete("/{workspace_id}/edges/{edge_id}", status_code=204)
def remove_edge(
    workspace_id: UUID,
    edge_id: UUID,
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Remove an edge from a workspace.
    """
    service.remove_edge(str(workspace_id), str(edge_id))
    return Response(status_code=204)
