"""Membership domain service.

Redeeming an invite touches three records kept in three stores: the
workspace gains a member, the user gains a membership (which also becomes
their current workspace), and the invite records the use. All three writes
go through one unit of work and are guarded by the versions read in the
same attempt, so two redemptions racing for the last slot of an invite
cannot both commit. The loser re-reads the invite and usually finds it
exhausted.
"""

import logfire

from tenancy.config import MembershipSettings
from tenancy.domain.error import (
    AlreadyMemberError,
    AlreadyRedeemedError,
    DomainError,
    InviteExhaustedError,
    InviteExpiredError,
    InviteInactiveError,
    InviteNotFoundError,
    WorkspaceGoneError,
)
from tenancy.domain.model.workspace import Workspace
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.value import InviteCode, InviteVerdict, UserId, WorkspaceRole

from .base import Service
from .invite_service import invite_verdict


def _verdict_error(verdict: InviteVerdict, code: InviteCode) -> DomainError:
    if verdict == InviteVerdict.NOT_FOUND:
        return InviteNotFoundError(code.root)
    if verdict == InviteVerdict.INACTIVE:
        return InviteInactiveError(f"Invite {code.redacted} is no longer active")
    if verdict == InviteVerdict.EXPIRED:
        return InviteExpiredError(f"Invite {code.redacted} has expired")
    if verdict == InviteVerdict.MAX_USES_REACHED:
        return InviteExhaustedError(f"Invite {code.redacted} has no uses left")
    return WorkspaceGoneError(f"Workspace for invite {code.redacted} no longer exists")


class MembershipService(Service):
    """Domain service for joining workspaces with an invite."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        membership_settings: MembershipSettings,
    ) -> None:
        """Initialize membership service.

        Args:
            unit_of_work_factory: Opens transactions over the stores
            membership_settings: Retry bounds for redemption
        """
        self.unit_of_work_factory = unit_of_work_factory
        self.membership_settings = membership_settings

    async def redeem_invite(self, code: InviteCode, user_id: UserId) -> Workspace:
        """Join the invite's workspace as a member.

        Args:
            code: Invite code
            user_id: Acting user

        Returns:
            The workspace including its new member

        Raises:
            InviteNotFoundError, InviteInactiveError, InviteExpiredError,
            InviteExhaustedError, AlreadyRedeemedError, WorkspaceGoneError,
            AlreadyMemberError: If the invite cannot be redeemed by this user
            ConflictError: If concurrent redemptions kept winning the race
            StorageUnavailableError: If the store cannot be reached
        """
        with logfire.span(
            "membership_service.redeem_invite",
            code=code.redacted,
            user_id=str(user_id),
        ):
            workspace = await self.retry_on_conflict(
                "redeem_invite",
                self.membership_settings.redeem_max_attempts,
                lambda: self._redeem_once(code, user_id),
            )
            logfire.info(
                "Invite redeemed",
                code=code.redacted,
                user_id=str(user_id),
                workspace_id=str(workspace.id),
                member_count=len(workspace.members),
            )
            return workspace

    async def _redeem_once(self, code: InviteCode, user_id: UserId) -> Workspace:
        async with self.unit_of_work_factory() as uow:
            now = self.now()

            invite = await uow.invites.find_by_code(code)
            verdict = invite_verdict(invite, now)
            if verdict != InviteVerdict.VALID:
                logfire.info(
                    "Invite not redeemable", code=code.redacted, verdict=verdict.value
                )
                raise _verdict_error(verdict, code)

            if invite.has_been_used_by(user_id):
                raise AlreadyRedeemedError(
                    f"User {user_id} already redeemed invite {code.redacted}"
                )

            workspace = await uow.workspaces.find_by_id(invite.workspace_id)
            if workspace is None:
                logfire.warn(
                    "Invite points at missing workspace",
                    code=code.redacted,
                    workspace_id=str(invite.workspace_id),
                )
                raise _verdict_error(InviteVerdict.WORKSPACE_GONE, code)

            user = await uow.users.get_or_new(user_id)
            if workspace.has_member(user_id) or user.is_member_of(workspace.id):
                raise AlreadyMemberError(
                    f"User {user_id} is already a member of workspace {workspace.id}"
                )

            joined = await uow.workspaces.update(
                workspace.add_member(user_id, WorkspaceRole.MEMBER, now)
            )
            await uow.users.save(user.join(workspace.id, WorkspaceRole.MEMBER, now))
            # Guarded on the invite version read above: a concurrent
            # redemption that committed first makes this write stale.
            await uow.invites.update(invite.record_use(user_id))

            await uow.commit()
        return joined
