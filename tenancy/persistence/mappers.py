"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Member lists are kept
as JSONB, so nested value objects round-trip through their JSON form.
"""

from typing import Any, Dict

from tenancy.domain.model import Invite, User, Workspace
from tenancy.domain.value import (
    InviteCode,
    UserId,
    UserWorkspace,
    WorkspaceId,
    WorkspaceMember,
)


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        code=InviteCode(row["code"]),
        workspace_id=WorkspaceId(row["workspace_id"]),
        created_by=UserId(row["created_by"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        max_uses=row.get("max_uses"),
        used_count=row["used_count"],
        used_by=frozenset(UserId(user_id) for user_id in row["used_by"] or []),
        active=row["active"],
        version=row["version"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    ``version`` is left out; repositories set it explicitly.
    """
    return {
        "code": invite.code.root,
        "workspace_id": invite.workspace_id,
        "created_by": invite.created_by,
        "created_at": invite.created_at,
        "expires_at": invite.expires_at,
        "max_uses": invite.max_uses,
        "used_count": invite.used_count,
        "used_by": sorted(invite.used_by, key=str),
        "active": invite.active,
    }


def row_to_workspace(row: Dict[str, Any]) -> Workspace:
    """Convert database row to Workspace domain model."""
    return Workspace(
        id=WorkspaceId(row["id"]),
        name=row["name"],
        owner_id=UserId(row["owner_id"]),
        members=tuple(
            WorkspaceMember.model_validate(member) for member in row["members"] or []
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        version=row["version"],
    )


def workspace_to_dict(workspace: Workspace) -> Dict[str, Any]:
    """Convert Workspace domain model to database dict."""
    return {
        "id": workspace.id,
        "name": workspace.name,
        "owner_id": workspace.owner_id,
        "members": [member.model_dump(mode="json") for member in workspace.members],
        "created_at": workspace.created_at,
        "updated_at": workspace.updated_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        workspaces=tuple(
            UserWorkspace.model_validate(entry) for entry in row["workspaces"] or []
        ),
        current_workspace_id=(
            WorkspaceId(row["current_workspace_id"])
            if row.get("current_workspace_id")
            else None
        ),
        version=row["version"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "workspaces": [entry.model_dump(mode="json") for entry in user.workspaces],
        "current_workspace_id": user.current_workspace_id,
    }
