"""Create workspace use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tenancy.application.usecase.base import BaseUseCase
from tenancy.domain.service import WorkspaceService
from tenancy.domain.value import UserId


class CreateWorkspaceRequest(BaseModel):
    """Request to create a workspace."""

    owner_id: UUID
    name: str


class CreateWorkspaceResponse(BaseModel):
    """Created workspace."""

    workspace_id: UUID
    name: str
    owner_id: UUID
    created_at: datetime


class CreateWorkspaceUseCase(BaseUseCase):
    """Use case for creating a workspace and selecting it for its owner."""

    def __init__(self, workspace_service: WorkspaceService) -> None:
        """Initialize create workspace use case.

        Args:
            workspace_service: Workspace domain service
        """
        self.workspace_service = workspace_service

    async def execute(self, request: CreateWorkspaceRequest) -> CreateWorkspaceResponse:
        """Execute create workspace use case.

        Args:
            request: Owner and workspace name

        Returns:
            The created workspace

        Raises:
            InvalidInputError: If the name is empty or too long
        """
        owner_id = UserId(request.owner_id)
        with logfire.span("create_workspace.execute", owner_id=str(owner_id)):
            workspace = await self.workspace_service.create_workspace(
                owner_id, request.name
            )
            return CreateWorkspaceResponse(
                workspace_id=workspace.id,
                name=workspace.name,
                owner_id=workspace.owner_id,
                created_at=workspace.created_at,
            )
