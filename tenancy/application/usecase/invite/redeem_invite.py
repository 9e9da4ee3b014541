"""Redeem invite use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, ValidationError

from tenancy.application.usecase.base import BaseUseCase
from tenancy.domain.error import InviteNotFoundError
from tenancy.domain.service import MembershipService
from tenancy.domain.value import InviteCode, UserId


class RedeemInviteRequest(BaseModel):
    """Request to join a workspace with an invite code."""

    code: str
    user_id: UUID


class RedeemInviteResponse(BaseModel):
    """The joined workspace, now the user's current one."""

    workspace_id: UUID
    workspace_name: str
    role: str
    joined_at: datetime
    member_count: int


class RedeemInviteUseCase(BaseUseCase):
    """Use case for redeeming an invite."""

    def __init__(self, membership_service: MembershipService) -> None:
        """Initialize redeem invite use case.

        Args:
            membership_service: Membership domain service
        """
        self.membership_service = membership_service

    async def execute(self, request: RedeemInviteRequest) -> RedeemInviteResponse:
        """Redeem an invite for the requesting user.

        Args:
            request: Code and acting user

        Returns:
            The joined workspace and the user's membership in it

        Raises:
            InviteNotFoundError: If the code is malformed or unknown
            DomainError: Any other redemption failure from the service
        """
        try:
            code = InviteCode(request.code)
        except ValidationError as e:
            raise InviteNotFoundError(request.code) from e

        user_id = UserId(request.user_id)
        with logfire.span(
            "redeem_invite.execute", code=code.redacted, user_id=str(user_id)
        ):
            workspace = await self.membership_service.redeem_invite(code, user_id)
            member = workspace.find_member(user_id)

            return RedeemInviteResponse(
                workspace_id=workspace.id,
                workspace_name=workspace.name,
                role=member.role.value,
                joined_at=member.joined_at,
                member_count=len(workspace.members),
            )
