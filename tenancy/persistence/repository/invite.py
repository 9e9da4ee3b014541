"""PostgreSQL implementation of Invite repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.error import DuplicateRecordError, StaleRecordError
from tenancy.domain.model import Invite
from tenancy.domain.repository import InviteRepository
from tenancy.domain.value import InviteCode
from tenancy.persistence.mappers import invite_to_dict, row_to_invite
from tenancy.persistence.tables import workspace_invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_code(self, code: InviteCode) -> Optional[Invite]:
        """Find an invite by its code.

        Args:
            code: Invite code to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(workspace_invites_table).where(
            workspace_invites_table.c.code == code.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def add(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: Invite to insert

        Returns:
            Stored invite at version 1

        Raises:
            DuplicateRecordError: If the code is taken
        """
        stmt = insert(workspace_invites_table).values(
            **invite_to_dict(invite), version=1
        )
        try:
            await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateRecordError("invites", invite.code.redacted) from e
        return invite.model_copy(update={"version": 1})

    async def update(self, invite: Invite) -> Invite:
        """Write the invite only if its version is unchanged.

        The version check and the write are one UPDATE statement, so a
        concurrent redemption that committed in between makes it match zero
        rows.

        Args:
            invite: New invite state carrying the version it was read at

        Returns:
            Stored invite with version incremented

        Raises:
            StaleRecordError: If the stored version moved on
        """
        stmt = (
            update(workspace_invites_table)
            .where(
                workspace_invites_table.c.code == invite.code.root,
                workspace_invites_table.c.version == invite.version,
            )
            .values(**invite_to_dict(invite), version=invite.version + 1)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            raise StaleRecordError("invites", invite.code.redacted, invite.version)
        return invite.model_copy(update={"version": invite.version + 1})
