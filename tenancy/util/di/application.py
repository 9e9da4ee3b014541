"""Application layer DI providers."""

from dishka import Scope, provide

from tenancy.application.usecase.invite import (
    GenerateInviteUseCase,
    RedeemInviteUseCase,
    RevokeInviteUseCase,
    ValidateInviteUseCase,
)
from tenancy.application.usecase.workspace import (
    CreateWorkspaceUseCase,
    ListWorkspacesUseCase,
    SwitchWorkspaceUseCase,
)
from tenancy.domain.service import InviteService, MembershipService, WorkspaceService
from tenancy.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Invite use cases
    @provide
    def get_generate_invite_use_case(
        self, invite_service: InviteService, workspace_service: WorkspaceService
    ) -> GenerateInviteUseCase:
        """Provide generate invite use case."""
        return GenerateInviteUseCase(
            invite_service=invite_service, workspace_service=workspace_service
        )

    @provide
    def get_validate_invite_use_case(
        self, invite_service: InviteService
    ) -> ValidateInviteUseCase:
        """Provide validate invite use case."""
        return ValidateInviteUseCase(invite_service=invite_service)

    @provide
    def get_redeem_invite_use_case(
        self, membership_service: MembershipService
    ) -> RedeemInviteUseCase:
        """Provide redeem invite use case."""
        return RedeemInviteUseCase(membership_service=membership_service)

    @provide
    def get_revoke_invite_use_case(
        self, invite_service: InviteService, workspace_service: WorkspaceService
    ) -> RevokeInviteUseCase:
        """Provide revoke invite use case."""
        return RevokeInviteUseCase(
            invite_service=invite_service, workspace_service=workspace_service
        )

    # Workspace use cases
    @provide
    def get_create_workspace_use_case(
        self, workspace_service: WorkspaceService
    ) -> CreateWorkspaceUseCase:
        """Provide create workspace use case."""
        return CreateWorkspaceUseCase(workspace_service=workspace_service)

    @provide
    def get_list_workspaces_use_case(
        self, workspace_service: WorkspaceService
    ) -> ListWorkspacesUseCase:
        """Provide list workspaces use case."""
        return ListWorkspacesUseCase(workspace_service=workspace_service)

    @provide
    def get_switch_workspace_use_case(
        self, workspace_service: WorkspaceService
    ) -> SwitchWorkspaceUseCase:
        """Provide switch workspace use case."""
        return SwitchWorkspaceUseCase(workspace_service=workspace_service)
