"""Domain value objects for workspace membership.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import field_validator

from tenancy.domain.value.common import RootValueObject, ValueObject
from tenancy.domain.value.identifiers import UserId, WorkspaceId


class WorkspaceRole(str, Enum):
    """Role a user holds inside a workspace."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"

    @property
    def can_manage_invites(self) -> bool:
        return self in (WorkspaceRole.OWNER, WorkspaceRole.ADMIN)


class InviteVerdict(str, Enum):
    """Outcome of evaluating whether an invite code can be redeemed."""

    VALID = "valid"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    INACTIVE = "inactive"
    MAX_USES_REACHED = "max_uses_reached"
    WORKSPACE_GONE = "workspace_gone"


class InviteCode(RootValueObject[str]):
    """Shareable invite code.

    Uppercase letters and digits, 4-32 characters. Codes are normalized to
    uppercase so users can type them in any case.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Strip whitespace and uppercase the code."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code format."""
        if not re.match(r"^[A-Z0-9]{4,32}$", v):
            raise ValueError("Invite code must be 4-32 uppercase letters or digits")
        return v

    @property
    def redacted(self) -> str:
        """Code prefix safe to put in logs."""
        return self.root[:3] + "..."


class WorkspaceMember(ValueObject):
    """A user's entry in a workspace's member list."""

    user_id: UserId
    role: WorkspaceRole
    joined_at: datetime


class UserWorkspace(ValueObject):
    """A workspace entry in a user's membership list."""

    workspace_id: WorkspaceId
    role: WorkspaceRole
    joined_at: datetime
