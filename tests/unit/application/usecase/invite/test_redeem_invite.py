"""Tests for redeem invite use case."""

from uuid import uuid4

import pytest

from tenancy.application.usecase.invite import RedeemInviteRequest, RedeemInviteUseCase
from tenancy.domain.error import InviteExhaustedError, InviteNotFoundError
from tenancy.domain.service import InviteService, WorkspaceService
from tenancy.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRedeemInviteUseCase:
    """Tests for RedeemInviteUseCase."""

    @pytest.mark.asyncio
    async def test_redeem_returns_joined_workspace(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RedeemInviteUseCase)
        workspace_service = await unit_env.get(WorkspaceService)
        invite_service = await unit_env.get(InviteService)
        owner_id = UserId(uuid4())
        workspace = await workspace_service.create_workspace(owner_id, "Lab")
        invite = await invite_service.generate_invite(workspace.id, owner_id)
        user_id = UserId(uuid4())

        # Act
        response = await use_case.execute(
            RedeemInviteRequest(code=invite.code.root, user_id=user_id)
        )

        # Assert
        assert response.workspace_id == workspace.id
        assert response.workspace_name == "Lab"
        assert response.role == "member"
        assert response.member_count == 2

    @pytest.mark.asyncio
    async def test_malformed_code_is_not_found(self, unit_env):
        use_case = await unit_env.get(RedeemInviteUseCase)

        with pytest.raises(InviteNotFoundError):
            await use_case.execute(RedeemInviteRequest(code="??", user_id=uuid4()))

    @pytest.mark.asyncio
    async def test_domain_errors_propagate(self, unit_env):
        use_case = await unit_env.get(RedeemInviteUseCase)
        workspace_service = await unit_env.get(WorkspaceService)
        invite_service = await unit_env.get(InviteService)
        owner_id = UserId(uuid4())
        workspace = await workspace_service.create_workspace(owner_id, "Lab")
        invite = await invite_service.generate_invite(
            workspace.id, owner_id, max_uses=1
        )
        await use_case.execute(
            RedeemInviteRequest(code=invite.code.root, user_id=uuid4())
        )

        with pytest.raises(InviteExhaustedError):
            await use_case.execute(
                RedeemInviteRequest(code=invite.code.root, user_id=uuid4())
            )
