"""Validate invite use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, ValidationError

from tenancy.domain.service import InviteService
from tenancy.domain.value import InviteCode, InviteVerdict


class ValidateInviteRequest(BaseModel):
    """Validate invite request."""

    code: str


class ValidateInviteResponse(BaseModel):
    """Validate invite response.

    ``reason`` is set whenever ``valid`` is false. Workspace details are
    included whenever the workspace still exists, so an invitee can see
    which workspace an expired link was for.
    """

    valid: bool
    reason: InviteVerdict | None = None
    workspace_id: UUID | None = None
    workspace_name: str | None = None
    member_count: int | None = None
    expires_at: datetime | None = None
    uses_remaining: int | None = None


class ValidateInviteUseCase:
    """Use case for previewing an invite before redeeming it.

    This allows the frontend to show the workspace being joined, or why the
    link no longer works, without changing anything.
    """

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize validate invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ValidateInviteRequest) -> ValidateInviteResponse:
        """Validate an invite code.

        A code that is not even well formed cannot exist, so it is reported
        the same way as an unknown one.

        Args:
            request: Validation request with code

        Returns:
            Validation response with verdict and invite details
        """
        try:
            code = InviteCode(request.code)
        except ValidationError:
            logfire.info("Malformed invite code", code=request.code[:3] + "...")
            return ValidateInviteResponse(valid=False, reason=InviteVerdict.NOT_FOUND)

        with logfire.span("validate_invite.execute", code=code.redacted):
            validation = await self.invite_service.validate_invite(code)

            response = ValidateInviteResponse(
                valid=validation.valid,
                reason=None if validation.valid else validation.verdict,
            )

            invite = validation.invite
            if invite is not None:
                response.expires_at = invite.expires_at
                if invite.max_uses is not None:
                    response.uses_remaining = invite.max_uses - invite.used_count

            workspace = validation.workspace
            if workspace is not None:
                response.workspace_id = workspace.id
                response.workspace_name = workspace.name
                response.member_count = len(workspace.members)

            return response
