"""User membership record.

Holds which workspaces a user belongs to and which one is selected. The
user account itself (credentials, profile) lives with the authentication
provider; this record only tracks workspace membership.
"""

from datetime import datetime
from typing import Optional

from pydantic import model_validator

from tenancy.domain.model.common import VersionedModel
from tenancy.domain.value import UserId, UserWorkspace, WorkspaceId, WorkspaceRole


class User(VersionedModel):
    """User workspace reference.

    A user without a stored record is represented by ``User(id=...)`` with
    no memberships and version 0.
    """

    id: UserId
    workspaces: tuple[UserWorkspace, ...] = ()
    current_workspace_id: Optional[WorkspaceId] = None

    @model_validator(mode="after")
    def check_memberships(self) -> "User":
        """Memberships are unique and the current selection is one of them."""
        workspace_ids = [entry.workspace_id for entry in self.workspaces]
        if len(workspace_ids) != len(set(workspace_ids)):
            raise ValueError("A workspace can only appear once per user")
        if (
            self.current_workspace_id is not None
            and self.current_workspace_id not in workspace_ids
        ):
            raise ValueError("current_workspace_id must be a workspace the user joined")
        return self

    def membership(self, workspace_id: WorkspaceId) -> Optional[UserWorkspace]:
        for entry in self.workspaces:
            if entry.workspace_id == workspace_id:
                return entry
        return None

    def is_member_of(self, workspace_id: WorkspaceId) -> bool:
        return self.membership(workspace_id) is not None

    def join(
        self, workspace_id: WorkspaceId, role: WorkspaceRole, joined_at: datetime
    ) -> "User":
        """Return a copy with the workspace appended and selected as current."""
        entry = UserWorkspace(workspace_id=workspace_id, role=role, joined_at=joined_at)
        return self.model_copy(
            update={
                "workspaces": self.workspaces + (entry,),
                "current_workspace_id": workspace_id,
            }
        )

    def switch_to(self, workspace_id: WorkspaceId) -> "User":
        return self.model_copy(update={"current_workspace_id": workspace_id})
