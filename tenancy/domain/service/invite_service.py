"""Invite domain service."""

import secrets
from datetime import datetime, timedelta
from typing import Optional

import logfire

from tenancy.config import InvitationSettings, MembershipSettings
from tenancy.domain.error import InvalidInputError, InviteNotFoundError
from tenancy.domain.model.invite import Invite
from tenancy.domain.model.workspace import Workspace
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.value import InviteCode, InviteVerdict, UserId, WorkspaceId
from tenancy.domain.value.common import ValueObject

from .base import Service


def invite_verdict(invite: Optional[Invite], now: datetime) -> InviteVerdict:
    """Eligibility of an invite as seen by any user.

    Shared by previews and redemption so the two never disagree.
    """
    if invite is None:
        return InviteVerdict.NOT_FOUND
    return invite.check_eligibility(now)


class InviteValidation(ValueObject):
    """Result of validating an invite code without redeeming it."""

    verdict: InviteVerdict
    invite: Optional[Invite] = None
    workspace: Optional[Workspace] = None

    @property
    def valid(self) -> bool:
        return self.verdict == InviteVerdict.VALID


class InviteService(Service):
    """Domain service for generating, validating and revoking invites."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        invitation_settings: InvitationSettings,
        membership_settings: MembershipSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            unit_of_work_factory: Opens transactions over the stores
            invitation_settings: Expiry bounds and code format
            membership_settings: Retry bounds for conditional writes
        """
        self.unit_of_work_factory = unit_of_work_factory
        self.invitation_settings = invitation_settings
        self.membership_settings = membership_settings

    def new_code(self) -> InviteCode:
        """Draw an unpredictable invite code."""
        alphabet = self.invitation_settings.code_alphabet
        length = self.invitation_settings.code_length
        return InviteCode("".join(secrets.choice(alphabet) for _ in range(length)))

    async def generate_invite(
        self,
        workspace_id: WorkspaceId,
        requester_id: UserId,
        expires_in_days: int | None = None,
        max_uses: int | None = None,
    ) -> Invite:
        """Create a new invite for a workspace.

        Does not check the requester's permissions; callers authorize first.

        Args:
            workspace_id: Workspace the invite grants access to
            requester_id: User creating the invite
            expires_in_days: Lifetime in days, settings default when None
            max_uses: Optional cap on redemptions, unlimited when None

        Returns:
            Stored invite

        Raises:
            InvalidInputError: If expiry or max uses are out of bounds
            ConflictError: If no unused code could be found
        """
        settings = self.invitation_settings
        if expires_in_days is None:
            expires_in_days = settings.default_expires_in_days

        if not (
            settings.min_expires_in_days
            <= expires_in_days
            <= settings.max_expires_in_days
        ):
            raise InvalidInputError(
                f"expires_in_days must be between {settings.min_expires_in_days} "
                f"and {settings.max_expires_in_days}, got {expires_in_days}"
            )
        if max_uses is not None and max_uses < 1:
            raise InvalidInputError(f"max_uses must be at least 1, got {max_uses}")

        with logfire.span(
            "invite_service.generate_invite",
            workspace_id=str(workspace_id),
            requester_id=str(requester_id),
            expires_in_days=expires_in_days,
            max_uses=max_uses,
        ):
            now = self.now()

            async def attempt() -> Invite:
                invite = Invite(
                    code=self.new_code(),
                    workspace_id=workspace_id,
                    created_by=requester_id,
                    created_at=now,
                    expires_at=now + timedelta(days=expires_in_days),
                    max_uses=max_uses,
                )
                async with self.unit_of_work_factory() as uow:
                    saved = await uow.invites.add(invite)
                    await uow.commit()
                return saved

            saved = await self.retry_on_conflict(
                "generate_invite", settings.code_generation_attempts, attempt
            )
            logfire.info(
                "Invite generated",
                code=saved.code.redacted,
                workspace_id=str(workspace_id),
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def get_invite(self, code: InviteCode) -> Invite | None:
        """Get invite by code.

        Args:
            code: Invite code

        Returns:
            Invite if found, None otherwise
        """
        async with self.unit_of_work_factory() as uow:
            return await uow.invites.find_by_code(code)

    async def validate_invite(self, code: InviteCode) -> InviteValidation:
        """Check whether an invite could be redeemed right now.

        Read-only. Per-user conditions (already redeemed, already a member)
        are only known at redemption time and are not part of the verdict.

        Args:
            code: Invite code

        Returns:
            Verdict, with the invite and workspace when they exist
        """
        with logfire.span("invite_service.validate_invite", code=code.redacted):
            async with self.unit_of_work_factory() as uow:
                invite = await uow.invites.find_by_code(code)
                verdict = invite_verdict(invite, self.now())
                workspace = None
                if invite is not None:
                    workspace = await uow.workspaces.find_by_id(invite.workspace_id)
                    if verdict == InviteVerdict.VALID and workspace is None:
                        verdict = InviteVerdict.WORKSPACE_GONE

            logfire.info(
                "Invite validated", code=code.redacted, verdict=verdict.value
            )
            return InviteValidation(verdict=verdict, invite=invite, workspace=workspace)

    async def revoke_invite(self, code: InviteCode) -> Invite:
        """Deactivate an invite so it can no longer be redeemed.

        The record is kept. Revoking an inactive invite changes nothing.

        Args:
            code: Invite code

        Returns:
            The invite as stored after revocation

        Raises:
            InviteNotFoundError: If no invite has this code
        """
        with logfire.span("invite_service.revoke_invite", code=code.redacted):

            async def attempt() -> Invite:
                async with self.unit_of_work_factory() as uow:
                    invite = await uow.invites.find_by_code(code)
                    if invite is None:
                        raise InviteNotFoundError(code.root)
                    if not invite.active:
                        return invite
                    revoked = await uow.invites.update(invite.deactivate())
                    await uow.commit()
                return revoked

            revoked = await self.retry_on_conflict(
                "revoke_invite", self.membership_settings.write_max_attempts, attempt
            )
            logfire.info("Invite revoked", code=code.redacted)
            return revoked
