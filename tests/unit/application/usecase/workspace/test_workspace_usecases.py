"""Tests for workspace use cases."""

from uuid import uuid4

import pytest

from tenancy.application.usecase.workspace import (
    CreateWorkspaceRequest,
    CreateWorkspaceUseCase,
    ListWorkspacesRequest,
    ListWorkspacesUseCase,
    SwitchWorkspaceRequest,
    SwitchWorkspaceUseCase,
)
from tenancy.domain.error import NotAMemberError
from tenancy.domain.value import WorkspaceRole
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestWorkspaceUseCases:
    """Tests for creating, listing and switching workspaces."""

    @pytest.mark.asyncio
    async def test_create_list_and_switch(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateWorkspaceUseCase)
        list_workspaces = await unit_env.get(ListWorkspacesUseCase)
        switch = await unit_env.get(SwitchWorkspaceUseCase)
        user_id = uuid4()

        first = await create.execute(
            CreateWorkspaceRequest(owner_id=user_id, name="First")
        )
        second = await create.execute(
            CreateWorkspaceRequest(owner_id=user_id, name="Second")
        )

        # Act
        listed = await list_workspaces.execute(ListWorkspacesRequest(user_id=user_id))

        # Assert
        assert [w.workspace_id for w in listed.workspaces] == [
            first.workspace_id,
            second.workspace_id,
        ]
        assert listed.current_workspace_id == second.workspace_id
        assert [w.current for w in listed.workspaces] == [False, True]
        assert all(w.role == WorkspaceRole.OWNER for w in listed.workspaces)

        # Act - switch back
        switched = await switch.execute(
            SwitchWorkspaceRequest(user_id=user_id, workspace_id=first.workspace_id)
        )

        # Assert
        assert switched.current_workspace_id == first.workspace_id
        listed = await list_workspaces.execute(ListWorkspacesRequest(user_id=user_id))
        assert [w.current for w in listed.workspaces] == [True, False]

    @pytest.mark.asyncio
    async def test_list_for_unknown_user_is_empty(self, unit_env):
        list_workspaces = await unit_env.get(ListWorkspacesUseCase)

        listed = await list_workspaces.execute(ListWorkspacesRequest(user_id=uuid4()))

        assert listed.workspaces == []
        assert listed.current_workspace_id is None

    @pytest.mark.asyncio
    async def test_switch_to_foreign_workspace(self, unit_env):
        create = await unit_env.get(CreateWorkspaceUseCase)
        switch = await unit_env.get(SwitchWorkspaceUseCase)
        theirs = await create.execute(
            CreateWorkspaceRequest(owner_id=uuid4(), name="Theirs")
        )

        with pytest.raises(NotAMemberError):
            await switch.execute(
                SwitchWorkspaceRequest(
                    user_id=uuid4(), workspace_id=theirs.workspace_id
                )
            )
