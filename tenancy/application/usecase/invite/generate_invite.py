"""Generate invite use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tenancy.application.usecase.base import BaseUseCase
from tenancy.application.usecase.invite.authorization import require_invite_manager
from tenancy.domain.service import InviteService, WorkspaceService
from tenancy.domain.value import UserId, WorkspaceId


class GenerateInviteRequest(BaseModel):
    """Request to create an invite code for a workspace."""

    workspace_id: UUID
    requester_id: UUID
    expires_in_days: int | None = None
    max_uses: int | None = None


class GenerateInviteResponse(BaseModel):
    """Created invite, including the code to share."""

    code: str
    workspace_id: UUID
    created_at: datetime
    expires_at: datetime
    max_uses: int | None


class GenerateInviteUseCase(BaseUseCase):
    """Use case for creating an invite as a workspace owner or admin."""

    def __init__(
        self, invite_service: InviteService, workspace_service: WorkspaceService
    ) -> None:
        """Initialize generate invite use case.

        Args:
            invite_service: Invite domain service
            workspace_service: Workspace domain service
        """
        self.invite_service = invite_service
        self.workspace_service = workspace_service

    async def execute(self, request: GenerateInviteRequest) -> GenerateInviteResponse:
        """Authorize the requester, then generate the invite.

        Args:
            request: Workspace, requester and invite limits

        Returns:
            The stored invite

        Raises:
            NotFoundError: If the workspace does not exist
            NotAuthorizedError: If the requester is not an owner or admin
            InvalidInputError: If expiry or max uses are out of bounds
        """
        workspace_id = WorkspaceId(request.workspace_id)
        requester_id = UserId(request.requester_id)

        with logfire.span(
            "generate_invite.execute",
            workspace_id=str(workspace_id),
            requester_id=str(requester_id),
        ):
            await require_invite_manager(
                self.workspace_service, workspace_id, requester_id, "generate invites"
            )

            invite = await self.invite_service.generate_invite(
                workspace_id=workspace_id,
                requester_id=requester_id,
                expires_in_days=request.expires_in_days,
                max_uses=request.max_uses,
            )

            return GenerateInviteResponse(
                code=invite.code.root,
                workspace_id=invite.workspace_id,
                created_at=invite.created_at,
                expires_at=invite.expires_at,
                max_uses=invite.max_uses,
            )
