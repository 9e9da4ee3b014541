"""Revoke invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, ValidationError

from tenancy.application.usecase.base import BaseUseCase
from tenancy.application.usecase.invite.authorization import require_invite_manager
from tenancy.domain.error import InviteNotFoundError
from tenancy.domain.service import InviteService, WorkspaceService
from tenancy.domain.value import InviteCode, UserId


class RevokeInviteRequest(BaseModel):
    """Request to deactivate an invite."""

    code: str
    requester_id: UUID


class RevokeInviteResponse(BaseModel):
    """Invite state after revocation."""

    code: str
    active: bool
    used_count: int


class RevokeInviteUseCase(BaseUseCase):
    """Use case for revoking an invite as a workspace owner or admin."""

    def __init__(
        self, invite_service: InviteService, workspace_service: WorkspaceService
    ) -> None:
        self.invite_service = invite_service
        self.workspace_service = workspace_service

    async def execute(self, request: RevokeInviteRequest) -> RevokeInviteResponse:
        """Authorize the requester against the invite's workspace and revoke.

        Raises:
            InviteNotFoundError: If the code is malformed or unknown
            NotFoundError: If the invite's workspace no longer exists
            NotAuthorizedError: If the requester is not an owner or admin
        """
        try:
            code = InviteCode(request.code)
        except ValidationError as e:
            raise InviteNotFoundError(request.code) from e

        requester_id = UserId(request.requester_id)
        with logfire.span(
            "revoke_invite.execute", code=code.redacted, requester_id=str(requester_id)
        ):
            invite = await self.invite_service.get_invite(code)
            if invite is None:
                raise InviteNotFoundError(code.root)

            await require_invite_manager(
                self.workspace_service,
                invite.workspace_id,
                requester_id,
                "revoke invites",
            )

            revoked = await self.invite_service.revoke_invite(code)
            return RevokeInviteResponse(
                code=revoked.code.root,
                active=revoked.active,
                used_count=revoked.used_count,
            )
