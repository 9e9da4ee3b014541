"""Workspace domain service."""

from uuid import uuid4

import logfire

from tenancy.config import MembershipSettings
from tenancy.domain.error import InvalidInputError, NotAMemberError
from tenancy.domain.model.user import User
from tenancy.domain.model.workspace import Workspace
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.domain.value import UserId, WorkspaceId, WorkspaceMember, WorkspaceRole

from .base import Service

MAX_NAME_LENGTH = 100


class WorkspaceService(Service):
    """Domain service for workspace lifecycle and selection."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        membership_settings: MembershipSettings,
    ) -> None:
        """Initialize workspace service.

        Args:
            unit_of_work_factory: Opens transactions over the stores
            membership_settings: Retry bounds for conditional writes
        """
        self.unit_of_work_factory = unit_of_work_factory
        self.membership_settings = membership_settings

    async def create_workspace(self, owner_id: UserId, name: str) -> Workspace:
        """Create a workspace owned by ``owner_id``.

        The owner becomes its first member and it becomes their current
        workspace, all in one unit of work.

        Args:
            owner_id: Creating user
            name: Display name, 1-100 characters after trimming

        Returns:
            Created workspace

        Raises:
            InvalidInputError: If the name is empty or too long
        """
        name = name.strip()
        if not name or len(name) > MAX_NAME_LENGTH:
            raise InvalidInputError(
                f"Workspace name must be 1-{MAX_NAME_LENGTH} characters"
            )

        with logfire.span(
            "workspace_service.create_workspace", owner_id=str(owner_id), name=name
        ):

            async def attempt() -> Workspace:
                now = self.now()
                workspace = Workspace(
                    id=WorkspaceId(uuid4()),
                    name=name,
                    owner_id=owner_id,
                    members=(
                        WorkspaceMember(
                            user_id=owner_id, role=WorkspaceRole.OWNER, joined_at=now
                        ),
                    ),
                    created_at=now,
                    updated_at=now,
                )
                async with self.unit_of_work_factory() as uow:
                    saved = await uow.workspaces.add(workspace)
                    user = await uow.users.get_or_new(owner_id)
                    await uow.users.save(
                        user.join(workspace.id, WorkspaceRole.OWNER, now)
                    )
                    await uow.commit()
                return saved

            saved = await self.retry_on_conflict(
                "create_workspace", self.membership_settings.write_max_attempts, attempt
            )
            logfire.info(
                "Workspace created", workspace_id=str(saved.id), owner_id=str(owner_id)
            )
            return saved

    async def get_workspace(self, workspace_id: WorkspaceId) -> Workspace | None:
        """Get workspace by ID.

        Args:
            workspace_id: Workspace ID

        Returns:
            Workspace if found, None otherwise
        """
        async with self.unit_of_work_factory() as uow:
            return await uow.workspaces.find_by_id(workspace_id)

    async def get_user(self, user_id: UserId) -> User:
        """Get a user's membership record, empty if never written."""
        async with self.unit_of_work_factory() as uow:
            return await uow.users.get_or_new(user_id)

    async def list_workspaces(self, user_id: UserId) -> list[Workspace]:
        """List workspaces the user is a member of.

        Args:
            user_id: Member's user ID

        Returns:
            Workspaces ordered by creation time
        """
        with logfire.span("workspace_service.list_workspaces", user_id=str(user_id)):
            async with self.unit_of_work_factory() as uow:
                workspaces = await uow.workspaces.find_by_member(user_id)
            logfire.info(
                "Workspaces listed", user_id=str(user_id), count=len(workspaces)
            )
            return workspaces

    async def switch_workspace(
        self, user_id: UserId, workspace_id: WorkspaceId
    ) -> User:
        """Select one of the user's workspaces as current.

        Only the user's own record is read and written.

        Args:
            user_id: Acting user
            workspace_id: Workspace to select

        Returns:
            Updated user record

        Raises:
            NotAMemberError: If the user has not joined the workspace
        """
        with logfire.span(
            "workspace_service.switch_workspace",
            user_id=str(user_id),
            workspace_id=str(workspace_id),
        ):

            async def attempt() -> User:
                async with self.unit_of_work_factory() as uow:
                    user = await uow.users.find_by_id(user_id)
                    if user is None or not user.is_member_of(workspace_id):
                        logfire.warn(
                            "Switch to workspace without membership",
                            user_id=str(user_id),
                            workspace_id=str(workspace_id),
                        )
                        raise NotAMemberError(str(user_id), str(workspace_id))
                    if user.current_workspace_id == workspace_id:
                        return user
                    switched = await uow.users.update(user.switch_to(workspace_id))
                    await uow.commit()
                return switched

            user = await self.retry_on_conflict(
                "switch_workspace", self.membership_settings.write_max_attempts, attempt
            )
            logfire.info(
                "Workspace switched",
                user_id=str(user_id),
                workspace_id=str(workspace_id),
            )
            return user
