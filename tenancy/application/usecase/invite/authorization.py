"""Who may manage a workspace's invites."""

import logfire

from tenancy.domain.error import NotAuthorizedError, NotFoundError
from tenancy.domain.model.workspace import Workspace
from tenancy.domain.service import WorkspaceService
from tenancy.domain.value import UserId, WorkspaceId


async def require_invite_manager(
    workspace_service: WorkspaceService,
    workspace_id: WorkspaceId,
    user_id: UserId,
    action: str,
) -> Workspace:
    """Load the workspace and check the user is its owner or an admin.

    Raises:
        NotFoundError: If the workspace does not exist
        NotAuthorizedError: If the user is not an owner or admin member
    """
    workspace = await workspace_service.get_workspace(workspace_id)
    if workspace is None:
        raise NotFoundError("Workspace", str(workspace_id))

    member = workspace.find_member(user_id)
    if member is None or not member.role.can_manage_invites:
        logfire.warn(
            "Invite management denied",
            action=action,
            workspace_id=str(workspace_id),
            user_id=str(user_id),
            role=member.role.value if member else None,
        )
        raise NotAuthorizedError(action, str(workspace_id), str(user_id))

    return workspace
