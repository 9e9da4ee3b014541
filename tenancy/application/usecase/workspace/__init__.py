"""Workspace use cases."""

from tenancy.application.usecase.workspace.create_workspace import (
    CreateWorkspaceRequest,
    CreateWorkspaceResponse,
    CreateWorkspaceUseCase,
)
from tenancy.application.usecase.workspace.list_workspaces import (
    ListWorkspacesRequest,
    ListWorkspacesResponse,
    ListWorkspacesUseCase,
    WorkspaceItem,
)
from tenancy.application.usecase.workspace.switch_workspace import (
    SwitchWorkspaceRequest,
    SwitchWorkspaceResponse,
    SwitchWorkspaceUseCase,
)

__all__ = [
    "CreateWorkspaceRequest",
    "CreateWorkspaceResponse",
    "CreateWorkspaceUseCase",
    "ListWorkspacesRequest",
    "ListWorkspacesResponse",
    "ListWorkspacesUseCase",
    "SwitchWorkspaceRequest",
    "SwitchWorkspaceResponse",
    "SwitchWorkspaceUseCase",
    "WorkspaceItem",
]
