"""Switch workspace use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tenancy.application.usecase.base import BaseUseCase
from tenancy.domain.service import WorkspaceService
from tenancy.domain.value import UserId, WorkspaceId


class SwitchWorkspaceRequest(BaseModel):
    """Request to select a workspace as current."""

    user_id: UUID
    workspace_id: UUID


class SwitchWorkspaceResponse(BaseModel):
    """The user's selection after switching."""

    current_workspace_id: UUID


class SwitchWorkspaceUseCase(BaseUseCase):
    """Use case for switching the current workspace."""

    def __init__(self, workspace_service: WorkspaceService) -> None:
        """Initialize switch workspace use case.

        Args:
            workspace_service: Workspace domain service
        """
        self.workspace_service = workspace_service

    async def execute(self, request: SwitchWorkspaceRequest) -> SwitchWorkspaceResponse:
        """Execute switch workspace use case.

        Raises:
            NotAMemberError: If the user has not joined the workspace
        """
        user_id = UserId(request.user_id)
        workspace_id = WorkspaceId(request.workspace_id)
        with logfire.span(
            "switch_workspace.execute",
            user_id=str(user_id),
            workspace_id=str(workspace_id),
        ):
            user = await self.workspace_service.switch_workspace(user_id, workspace_id)
            return SwitchWorkspaceResponse(
                current_workspace_id=user.current_workspace_id
            )
