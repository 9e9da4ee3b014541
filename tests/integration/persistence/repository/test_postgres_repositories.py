"""Integration tests for the PostgreSQL units of work.

Assume PostgreSQL is reachable at DATABASE__URL with migrations applied
(``python scripts/run_migrations.py``). Skipped when it is not configured.
"""

import os
from uuid import uuid4

import pytest

from tenancy.domain.error import DuplicateRecordError, StaleRecordError
from tenancy.domain.model import User
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.value import UserId, WorkspaceRole
from tests.conftest import make_invite, make_workspace, store
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="needs a PostgreSQL database"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique_code() -> str:
    return uuid4().hex[:12].upper()


class TestPostgresUnitOfWork:
    """Integration tests for version-guarded writes against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_invite_round_trip(self, integration_env):
        # Arrange
        factory = await integration_env.get(UnitOfWorkFactory)
        workspace = make_workspace()
        user_id = UserId(uuid4())
        invite = make_invite(workspace.id, code=_unique_code(), max_uses=3)
        await store(factory, workspace, invite)

        # Act
        async with factory() as uow:
            stored = await uow.invites.find_by_code(invite.code)
            await uow.invites.update(stored.record_use(user_id))
            await uow.commit()

        # Assert
        async with factory() as uow:
            reloaded = await uow.invites.find_by_code(invite.code)
        assert reloaded.version == 2
        assert reloaded.used_by == frozenset({user_id})
        assert reloaded.max_uses == 3

    @pytest.mark.asyncio
    async def test_stale_update_matches_no_rows(self, integration_env):
        factory = await integration_env.get(UnitOfWorkFactory)
        workspace = make_workspace()
        invite = make_invite(workspace.id, code=_unique_code())
        await store(factory, workspace, invite)

        async with factory() as uow:
            stale = await uow.invites.find_by_code(invite.code)

        async with factory() as uow:
            fresh = await uow.invites.find_by_code(invite.code)
            await uow.invites.update(fresh.deactivate())
            await uow.commit()

        async with factory() as uow:
            with pytest.raises(StaleRecordError):
                await uow.invites.update(stale.record_use(UserId(uuid4())))

    @pytest.mark.asyncio
    async def test_duplicate_code_rejected(self, integration_env):
        factory = await integration_env.get(UnitOfWorkFactory)
        invite = make_invite(make_workspace().id, code=_unique_code())
        await store(factory, invite)

        with pytest.raises(DuplicateRecordError):
            await store(factory, invite)

    @pytest.mark.asyncio
    async def test_find_workspaces_by_member(self, integration_env):
        factory = await integration_env.get(UnitOfWorkFactory)
        member_id = UserId(uuid4())
        workspace = make_workspace(members={member_id: WorkspaceRole.MEMBER})
        await store(factory, workspace, make_workspace())

        async with factory() as uow:
            found = await uow.workspaces.find_by_member(member_id)

        assert [w.id for w in found] == [workspace.id]
        assert found[0].find_member(member_id).role == WorkspaceRole.MEMBER

    @pytest.mark.asyncio
    async def test_user_save_inserts_then_updates(self, integration_env):
        factory = await integration_env.get(UnitOfWorkFactory)
        workspace = make_workspace()
        user = User(id=UserId(uuid4()))

        async with factory() as uow:
            saved = await uow.users.save(
                user.join(workspace.id, WorkspaceRole.MEMBER, workspace.created_at)
            )
            await uow.commit()
        assert saved.version == 1

        async with factory() as uow:
            stored = await uow.users.find_by_id(user.id)
            assert stored.current_workspace_id == workspace.id
            updated = await uow.users.save(stored)
            await uow.commit()
        assert updated.version == 2
