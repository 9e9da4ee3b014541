"""Unit tests for WorkspaceService."""

from uuid import uuid4

import pytest

from tenancy.domain.error import InvalidInputError, NotAMemberError
from tenancy.domain.service import InviteService, MembershipService, WorkspaceService
from tenancy.domain.value import UserId, WorkspaceId, WorkspaceRole
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateWorkspace:
    """Tests for create_workspace method."""

    @pytest.mark.asyncio
    async def test_creator_becomes_owner_and_selects_it(self, unit_env):
        # Arrange
        workspace_service = await unit_env.get(WorkspaceService)
        owner_id = UserId(uuid4())

        # Act
        workspace = await workspace_service.create_workspace(owner_id, "  Acme  ")

        # Assert
        assert workspace.name == "Acme"
        assert workspace.owner_id == owner_id
        assert workspace.find_member(owner_id).role == WorkspaceRole.OWNER
        assert workspace.version == 1

        user = await workspace_service.get_user(owner_id)
        assert user.membership(workspace.id).role == WorkspaceRole.OWNER
        assert user.current_workspace_id == workspace.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    async def test_invalid_name_rejected(self, unit_env, name):
        workspace_service = await unit_env.get(WorkspaceService)

        with pytest.raises(InvalidInputError):
            await workspace_service.create_workspace(UserId(uuid4()), name)

    @pytest.mark.asyncio
    async def test_second_workspace_becomes_current(self, unit_env):
        workspace_service = await unit_env.get(WorkspaceService)
        owner_id = UserId(uuid4())

        await workspace_service.create_workspace(owner_id, "First")
        second = await workspace_service.create_workspace(owner_id, "Second")

        user = await workspace_service.get_user(owner_id)
        assert len(user.workspaces) == 2
        assert user.current_workspace_id == second.id


class TestListWorkspaces:
    """Tests for list_workspaces method."""

    @pytest.mark.asyncio
    async def test_lists_only_workspaces_with_membership(self, unit_env):
        # Arrange
        workspace_service = await unit_env.get(WorkspaceService)
        invite_service = await unit_env.get(InviteService)
        membership_service = await unit_env.get(MembershipService)
        user_id = UserId(uuid4())
        other_id = UserId(uuid4())

        own = await workspace_service.create_workspace(user_id, "Mine")
        await workspace_service.create_workspace(other_id, "Not mine")
        joined = await workspace_service.create_workspace(other_id, "Joined")
        invite = await invite_service.generate_invite(joined.id, other_id)
        await membership_service.redeem_invite(invite.code, user_id)

        # Act
        workspaces = await workspace_service.list_workspaces(user_id)

        # Assert
        assert [w.id for w in workspaces] == [own.id, joined.id]

    @pytest.mark.asyncio
    async def test_user_without_record_has_no_workspaces(self, unit_env):
        workspace_service = await unit_env.get(WorkspaceService)

        assert await workspace_service.list_workspaces(UserId(uuid4())) == []


class TestSwitchWorkspace:
    """Tests for switch_workspace method."""

    @pytest.mark.asyncio
    async def test_switch_to_joined_workspace(self, unit_env):
        workspace_service = await unit_env.get(WorkspaceService)
        user_id = UserId(uuid4())
        first = await workspace_service.create_workspace(user_id, "First")
        await workspace_service.create_workspace(user_id, "Second")

        user = await workspace_service.switch_workspace(user_id, first.id)

        assert user.current_workspace_id == first.id
        stored = await workspace_service.get_user(user_id)
        assert stored.current_workspace_id == first.id
        assert len(stored.workspaces) == 2

    @pytest.mark.asyncio
    async def test_switch_to_current_is_noop(self, unit_env):
        workspace_service = await unit_env.get(WorkspaceService)
        user_id = UserId(uuid4())
        workspace = await workspace_service.create_workspace(user_id, "Only")
        before = await workspace_service.get_user(user_id)

        user = await workspace_service.switch_workspace(user_id, workspace.id)

        assert user == before

    @pytest.mark.asyncio
    async def test_switch_to_foreign_workspace_rejected(self, unit_env):
        workspace_service = await unit_env.get(WorkspaceService)
        user_id = UserId(uuid4())
        mine = await workspace_service.create_workspace(user_id, "Mine")
        theirs = await workspace_service.create_workspace(UserId(uuid4()), "Theirs")

        with pytest.raises(NotAMemberError):
            await workspace_service.switch_workspace(user_id, theirs.id)

        stored = await workspace_service.get_user(user_id)
        assert stored.current_workspace_id == mine.id

    @pytest.mark.asyncio
    async def test_switch_without_any_record_rejected(self, unit_env):
        workspace_service = await unit_env.get(WorkspaceService)

        with pytest.raises(NotAMemberError):
            await workspace_service.switch_workspace(
                UserId(uuid4()), WorkspaceId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_switch_allowed_once_joined(self, unit_env):
        # Arrange
        workspace_service = await unit_env.get(WorkspaceService)
        invite_service = await unit_env.get(InviteService)
        membership_service = await unit_env.get(MembershipService)
        owner_id, user_id = UserId(uuid4()), UserId(uuid4())
        own = await workspace_service.create_workspace(user_id, "Mine")
        target = await workspace_service.create_workspace(owner_id, "Target")

        with pytest.raises(NotAMemberError):
            await workspace_service.switch_workspace(user_id, target.id)

        # Act
        invite = await invite_service.generate_invite(target.id, owner_id)
        await membership_service.redeem_invite(invite.code, user_id)
        await workspace_service.switch_workspace(user_id, own.id)
        user = await workspace_service.switch_workspace(user_id, target.id)

        # Assert
        assert user.current_workspace_id == target.id
