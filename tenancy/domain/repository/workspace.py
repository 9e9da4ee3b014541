"""Workspace repository interface."""

from abc import ABC, abstractmethod

from tenancy.domain.model.workspace import Workspace
from tenancy.domain.value import UserId, WorkspaceId


class WorkspaceRepository(ABC):
    """Repository for Workspace aggregate."""

    @abstractmethod
    async def find_by_id(self, workspace_id: WorkspaceId) -> Workspace | None:
        """Find a workspace by ID.

        Args:
            workspace_id: The workspace's unique identifier

        Returns:
            The workspace if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_member(self, user_id: UserId) -> list[Workspace]:
        """Find all workspaces a user is a member of.

        Args:
            user_id: The member's user ID

        Returns:
            Workspaces ordered by creation time
        """
        pass

    @abstractmethod
    async def add(self, workspace: Workspace) -> Workspace:
        """Insert a new workspace, stored as version 1.

        Raises:
            DuplicateRecordError: If the workspace ID already exists
        """
        pass

    @abstractmethod
    async def update(self, workspace: Workspace) -> Workspace:
        """Conditionally write a workspace.

        Raises:
            StaleRecordError: If the stored version no longer matches
        """
        pass
