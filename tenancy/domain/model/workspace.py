"""Workspace aggregate.

A workspace is a tenant: a named group of users with roles. Members are
unique per user.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from tenancy.domain.model.common import VersionedModel
from tenancy.domain.value import UserId, WorkspaceId, WorkspaceMember, WorkspaceRole


class Workspace(VersionedModel):
    """Workspace aggregate root."""

    id: WorkspaceId
    name: str = Field(min_length=1, max_length=100)
    owner_id: UserId
    members: tuple[WorkspaceMember, ...] = ()
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def check_unique_members(self) -> "Workspace":
        """A user may appear at most once in the member list."""
        user_ids = [member.user_id for member in self.members]
        if len(user_ids) != len(set(user_ids)):
            raise ValueError("A user can only be a member of a workspace once")
        return self

    def find_member(self, user_id: UserId) -> Optional[WorkspaceMember]:
        for member in self.members:
            if member.user_id == user_id:
                return member
        return None

    def has_member(self, user_id: UserId) -> bool:
        return self.find_member(user_id) is not None

    def add_member(
        self, user_id: UserId, role: WorkspaceRole, joined_at: datetime
    ) -> "Workspace":
        """Return a copy with ``user_id`` appended to the member list."""
        member = WorkspaceMember(user_id=user_id, role=role, joined_at=joined_at)
        return self.model_copy(
            update={"members": self.members + (member,), "updated_at": joined_at}
        )
