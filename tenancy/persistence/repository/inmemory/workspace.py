"""In-memory workspace repository for testing."""

from typing import TYPE_CHECKING, Optional, cast

from tenancy.domain.model.workspace import Workspace
from tenancy.domain.repository.workspace import WorkspaceRepository
from tenancy.domain.value import UserId, WorkspaceId

if TYPE_CHECKING:
    from .unit_of_work import InMemoryUnitOfWork


class InMemoryWorkspaceRepository(WorkspaceRepository):
    """In-memory implementation of WorkspaceRepository for testing."""

    def __init__(self, unit_of_work: "InMemoryUnitOfWork") -> None:
        self._uow = unit_of_work

    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by ID."""
        return cast(Optional[Workspace], self._uow.read("workspaces", workspace_id))

    async def find_by_member(self, user_id: UserId) -> list[Workspace]:
        """Find workspaces with the user in their member list."""
        matches = [
            cast(Workspace, workspace)
            for workspace in self._uow.scan("workspaces")
            if cast(Workspace, workspace).has_member(user_id)
        ]
        matches.sort(key=lambda ws: ws.created_at)
        return matches

    async def add(self, workspace: Workspace) -> Workspace:
        """Stage a new workspace."""
        return cast(
            Workspace, self._uow.stage_insert("workspaces", workspace.id, workspace)
        )

    async def update(self, workspace: Workspace) -> Workspace:
        """Stage a version-guarded workspace write."""
        return cast(
            Workspace, self._uow.stage_update("workspaces", workspace.id, workspace)
        )
