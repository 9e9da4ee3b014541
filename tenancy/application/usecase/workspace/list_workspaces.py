"""List workspaces use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tenancy.application.usecase.base import BaseUseCase
from tenancy.domain.service import WorkspaceService
from tenancy.domain.value import UserId, WorkspaceRole


class ListWorkspacesRequest(BaseModel):
    """List workspaces request."""

    user_id: UUID


class WorkspaceItem(BaseModel):
    """A workspace the user belongs to."""

    workspace_id: UUID
    name: str
    role: WorkspaceRole
    member_count: int
    joined_at: datetime
    current: bool


class ListWorkspacesResponse(BaseModel):
    """List workspaces response."""

    workspaces: list[WorkspaceItem]
    current_workspace_id: UUID | None


class ListWorkspacesUseCase(BaseUseCase):
    """Use case for listing a user's workspaces."""

    def __init__(self, workspace_service: WorkspaceService) -> None:
        self.workspace_service = workspace_service

    async def execute(self, request: ListWorkspacesRequest) -> ListWorkspacesResponse:
        """List workspaces with the user's role and the current selection."""
        user_id = UserId(request.user_id)
        with logfire.span("list_workspaces.execute", user_id=str(user_id)):
            workspaces = await self.workspace_service.list_workspaces(user_id)
            user = await self.workspace_service.get_user(user_id)

            items = []
            for workspace in workspaces:
                member = workspace.find_member(user_id)
                items.append(
                    WorkspaceItem(
                        workspace_id=workspace.id,
                        name=workspace.name,
                        role=member.role,
                        member_count=len(workspace.members),
                        joined_at=member.joined_at,
                        current=workspace.id == user.current_workspace_id,
                    )
                )

            return ListWorkspacesResponse(
                workspaces=items, current_workspace_id=user.current_workspace_id
            )
