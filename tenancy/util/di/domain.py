"""Domain layer DI providers."""

from dishka import Scope, provide

from tenancy.config import InvitationSettings, MembershipSettings
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.service import InviteService, MembershipService, WorkspaceService
from tenancy.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services open their own units of work, so one request may run several
    independent transactions (each redemption attempt gets a fresh one).
    """

    scope = Scope.REQUEST

    @provide
    def get_invite_service(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        invitation_settings: InvitationSettings,
        membership_settings: MembershipSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            unit_of_work_factory=unit_of_work_factory,
            invitation_settings=invitation_settings,
            membership_settings=membership_settings,
        )

    @provide
    def get_membership_service(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        membership_settings: MembershipSettings,
    ) -> MembershipService:
        """Provide membership domain service."""
        return MembershipService(
            unit_of_work_factory=unit_of_work_factory,
            membership_settings=membership_settings,
        )

    @provide
    def get_workspace_service(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        membership_settings: MembershipSettings,
    ) -> WorkspaceService:
        """Provide workspace domain service."""
        return WorkspaceService(
            unit_of_work_factory=unit_of_work_factory,
            membership_settings=membership_settings,
        )
