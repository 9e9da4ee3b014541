"""Tests for the Workspace and User membership models."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from tenancy.domain.model import User, Workspace
from tenancy.domain.value import (
    UserId,
    UserWorkspace,
    WorkspaceId,
    WorkspaceMember,
    WorkspaceRole,
)
from tests.conftest import make_workspace


class TestWorkspace:
    """Tests for Workspace."""

    def test_add_member_appends_with_role(self):
        workspace = make_workspace()
        user_id = UserId(uuid4())
        now = datetime.now(timezone.utc)

        updated = workspace.add_member(user_id, WorkspaceRole.MEMBER, now)

        assert len(updated.members) == 2
        assert updated.find_member(user_id).role == WorkspaceRole.MEMBER
        assert updated.updated_at == now
        assert not workspace.has_member(user_id)

    def test_duplicate_member_rejected(self):
        owner_id = UserId(uuid4())
        now = datetime.now(timezone.utc)
        member = WorkspaceMember(
            user_id=owner_id, role=WorkspaceRole.OWNER, joined_at=now
        )

        with pytest.raises(ValidationError):
            Workspace(
                id=WorkspaceId(uuid4()),
                name="Twice",
                owner_id=owner_id,
                members=(member, member),
            )

    @pytest.mark.parametrize("name", ["", "x" * 101])
    def test_name_length_enforced(self, name):
        with pytest.raises(ValidationError):
            make_workspace(name=name)


class TestUser:
    """Tests for the user membership record."""

    def test_new_user_has_no_memberships(self):
        user = User(id=UserId(uuid4()))

        assert user.workspaces == ()
        assert user.current_workspace_id is None
        assert user.version == 0

    def test_join_appends_and_selects(self):
        user = User(id=UserId(uuid4()))
        first = WorkspaceId(uuid4())
        second = WorkspaceId(uuid4())
        now = datetime.now(timezone.utc)

        user = user.join(first, WorkspaceRole.OWNER, now)
        user = user.join(second, WorkspaceRole.MEMBER, now)

        assert [w.workspace_id for w in user.workspaces] == [first, second]
        assert user.current_workspace_id == second
        assert user.membership(first).role == WorkspaceRole.OWNER

    def test_switch_to_changes_only_selection(self):
        first = WorkspaceId(uuid4())
        second = WorkspaceId(uuid4())
        now = datetime.now(timezone.utc)
        user = (
            User(id=UserId(uuid4()))
            .join(first, WorkspaceRole.MEMBER, now)
            .join(second, WorkspaceRole.MEMBER, now)
        )

        switched = user.switch_to(first)

        assert switched.current_workspace_id == first
        assert switched.workspaces == user.workspaces

    def test_current_workspace_must_be_a_membership(self):
        with pytest.raises(ValidationError):
            User(id=UserId(uuid4()), current_workspace_id=WorkspaceId(uuid4()))

    def test_duplicate_membership_rejected(self):
        workspace_id = WorkspaceId(uuid4())
        entry = UserWorkspace(
            workspace_id=workspace_id,
            role=WorkspaceRole.MEMBER,
            joined_at=datetime.now(timezone.utc),
        )
        with pytest.raises(ValidationError):
            User(id=UserId(uuid4()), workspaces=(entry, entry))
