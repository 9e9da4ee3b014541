"""Tests for generate invite use case."""

from uuid import uuid4

import pytest

from tenancy.application.usecase.invite import (
    GenerateInviteRequest,
    GenerateInviteUseCase,
)
from tenancy.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.service import InviteService, WorkspaceService
from tenancy.domain.value import InviteCode, UserId, WorkspaceRole
from tests.conftest import make_workspace, store
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGenerateInviteUseCase:
    """Tests for GenerateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_owner_generates_invite(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GenerateInviteUseCase)
        workspace_service = await unit_env.get(WorkspaceService)
        invite_service = await unit_env.get(InviteService)
        owner_id = UserId(uuid4())
        workspace = await workspace_service.create_workspace(owner_id, "Lab")

        # Act
        response = await use_case.execute(
            GenerateInviteRequest(
                workspace_id=workspace.id,
                requester_id=owner_id,
                expires_in_days=3,
                max_uses=10,
            )
        )

        # Assert
        assert response.workspace_id == workspace.id
        assert response.max_uses == 10
        invite = await invite_service.get_invite(InviteCode(response.code))
        assert invite is not None
        assert invite.created_by == owner_id

    @pytest.mark.asyncio
    async def test_admin_generates_invite(self, unit_env):
        use_case = await unit_env.get(GenerateInviteUseCase)
        factory = await unit_env.get(UnitOfWorkFactory)
        admin_id = UserId(uuid4())
        workspace = make_workspace(members={admin_id: WorkspaceRole.ADMIN})
        await store(factory, workspace)

        response = await use_case.execute(
            GenerateInviteRequest(workspace_id=workspace.id, requester_id=admin_id)
        )

        assert response.max_uses is None

    @pytest.mark.asyncio
    async def test_plain_member_not_authorized(self, unit_env):
        use_case = await unit_env.get(GenerateInviteUseCase)
        factory = await unit_env.get(UnitOfWorkFactory)
        member_id = UserId(uuid4())
        workspace = make_workspace(members={member_id: WorkspaceRole.MEMBER})
        await store(factory, workspace)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GenerateInviteRequest(workspace_id=workspace.id, requester_id=member_id)
            )

    @pytest.mark.asyncio
    async def test_outsider_not_authorized(self, unit_env):
        use_case = await unit_env.get(GenerateInviteUseCase)
        factory = await unit_env.get(UnitOfWorkFactory)
        workspace = make_workspace()
        await store(factory, workspace)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GenerateInviteRequest(
                    workspace_id=workspace.id, requester_id=UserId(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_workspace(self, unit_env):
        use_case = await unit_env.get(GenerateInviteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GenerateInviteRequest(workspace_id=uuid4(), requester_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_bounds_checked_after_authorization(self, unit_env):
        use_case = await unit_env.get(GenerateInviteUseCase)
        workspace_service = await unit_env.get(WorkspaceService)
        owner_id = UserId(uuid4())
        workspace = await workspace_service.create_workspace(owner_id, "Lab")

        with pytest.raises(InvalidInputError):
            await use_case.execute(
                GenerateInviteRequest(
                    workspace_id=workspace.id,
                    requester_id=owner_id,
                    expires_in_days=365,
                )
            )
