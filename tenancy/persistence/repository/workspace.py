"""PostgreSQL implementation of Workspace repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.error import DuplicateRecordError, StaleRecordError
from tenancy.domain.model import Workspace
from tenancy.domain.repository import WorkspaceRepository
from tenancy.domain.value import UserId, WorkspaceId
from tenancy.persistence.mappers import row_to_workspace, workspace_to_dict
from tenancy.persistence.tables import workspaces_table


class PostgresWorkspaceRepository(WorkspaceRepository):
    """PostgreSQL implementation of WorkspaceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by ID.

        Args:
            workspace_id: Workspace ID to look up

        Returns:
            Workspace if found, None otherwise
        """
        stmt = select(workspaces_table).where(workspaces_table.c.id == workspace_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None

    async def find_by_member(self, user_id: UserId) -> list[Workspace]:
        """Find workspaces whose member list contains the user.

        Uses JSONB containment, served by the GIN index on members.

        Args:
            user_id: Member's user ID

        Returns:
            Workspaces ordered by creation time
        """
        stmt = (
            select(workspaces_table)
            .where(workspaces_table.c.members.contains([{"user_id": str(user_id)}]))
            .order_by(workspaces_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_workspace(dict(row)) for row in result.mappings().all()]

    async def add(self, workspace: Workspace) -> Workspace:
        """Insert a new workspace."""
        stmt = insert(workspaces_table).values(
            **workspace_to_dict(workspace), version=1
        )
        try:
            await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateRecordError("workspaces", str(workspace.id)) from e
        return workspace.model_copy(update={"version": 1})

    async def update(self, workspace: Workspace) -> Workspace:
        """Write the workspace only if its version is unchanged."""
        stmt = (
            update(workspaces_table)
            .where(
                workspaces_table.c.id == workspace.id,
                workspaces_table.c.version == workspace.version,
            )
            .values(**workspace_to_dict(workspace), version=workspace.version + 1)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            raise StaleRecordError("workspaces", str(workspace.id), workspace.version)
        return workspace.model_copy(update={"version": workspace.version + 1})
