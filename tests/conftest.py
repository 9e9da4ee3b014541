"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from tenancy.domain.model import Invite, Workspace
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.value import (
    InviteCode,
    UserId,
    WorkspaceId,
    WorkspaceMember,
    WorkspaceRole,
)

# Spans and events are still created, they just go nowhere
logfire.configure(send_to_logfire=False, console=False)


def make_invite(
    workspace_id: WorkspaceId,
    code: str = "TESTCODE",
    expires_in: timedelta = timedelta(days=7),
    max_uses: int | None = None,
    used_by: frozenset[UserId] = frozenset(),
    active: bool = True,
) -> Invite:
    """Build an unsaved invite, expiry relative to now.

    A negative ``expires_in`` gives an already expired invite.
    """
    now = datetime.now(timezone.utc)
    return Invite(
        code=InviteCode(code),
        workspace_id=workspace_id,
        created_by=UserId(uuid4()),
        created_at=now - timedelta(days=1),
        expires_at=now + expires_in,
        max_uses=max_uses,
        used_count=len(used_by),
        used_by=used_by,
        active=active,
    )


def make_workspace(
    owner_id: UserId | None = None,
    name: str = "Acme Research",
    members: dict[UserId, WorkspaceRole] | None = None,
) -> Workspace:
    """Build an unsaved workspace with its owner and any extra members."""
    owner_id = owner_id or UserId(uuid4())
    now = datetime.now(timezone.utc)
    entries = [
        WorkspaceMember(user_id=owner_id, role=WorkspaceRole.OWNER, joined_at=now)
    ]
    for user_id, role in (members or {}).items():
        entries.append(WorkspaceMember(user_id=user_id, role=role, joined_at=now))
    return Workspace(
        id=WorkspaceId(uuid4()),
        name=name,
        owner_id=owner_id,
        members=tuple(entries),
    )


async def store(unit_of_work_factory: UnitOfWorkFactory, *records) -> None:
    """Insert invites and workspaces directly, bypassing the services."""
    async with unit_of_work_factory() as uow:
        for record in records:
            if isinstance(record, Invite):
                await uow.invites.add(record)
            else:
                await uow.workspaces.add(record)
        await uow.commit()
