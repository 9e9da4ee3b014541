"""Domain value objects for workspace membership."""

from tenancy.domain.value.identifiers import UserId, WorkspaceId
from tenancy.domain.value.types import (
    InviteCode,
    InviteVerdict,
    UserWorkspace,
    WorkspaceMember,
    WorkspaceRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "WorkspaceId",
    # Types
    "InviteCode",
    "InviteVerdict",
    "UserWorkspace",
    "WorkspaceMember",
    "WorkspaceRole",
]
