"""Invite entity.

Invites grant membership of a workspace to whoever redeems the code,
subject to expiry, an optional usage cap, and at most one use per user.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from tenancy.domain.model.common import VersionedModel
from tenancy.domain.value import InviteCode, InviteVerdict, UserId, WorkspaceId


class Invite(VersionedModel):
    """Workspace invite entity.

    Business rules:
    - used_count always equals the number of distinct users in used_by
    - used_count never exceeds max_uses when a cap is set
    - An invite whose cap is reached is deactivated
    - Invites are never deleted, only deactivated (kept for audit)
    """

    code: InviteCode
    workspace_id: WorkspaceId  # Weak reference, workspace may disappear
    created_by: UserId
    created_at: datetime
    expires_at: datetime
    max_uses: Optional[int] = Field(default=None, ge=1)  # None means unlimited
    used_count: int = Field(default=0, ge=0)
    used_by: frozenset[UserId] = frozenset()
    active: bool = True

    @model_validator(mode="after")
    def check_usage_invariants(self) -> "Invite":
        """Reject usage state that breaks the counting rules."""
        if self.used_count != len(self.used_by):
            raise ValueError("used_count must equal the number of users in used_by")
        if self.max_uses is not None:
            if self.used_count > self.max_uses:
                raise ValueError("used_count cannot exceed max_uses")
            if self.used_count >= self.max_uses and self.active:
                raise ValueError("An invite that reached max_uses must be inactive")
        return self

    @property
    def is_exhausted(self) -> bool:
        """Whether the usage cap has been reached."""
        return self.max_uses is not None and self.used_count >= self.max_uses

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def check_eligibility(self, now: datetime) -> InviteVerdict:
        """Evaluate the invite-only part of the redemption predicate.

        Order matters: inactive before expired before exhausted. An invite
        that was deactivated by reaching its cap reports MAX_USES_REACHED
        rather than INACTIVE so callers can tell it apart from a revoked one.
        """
        if not self.active:
            if self.is_exhausted:
                return InviteVerdict.MAX_USES_REACHED
            return InviteVerdict.INACTIVE
        if self.is_expired(now):
            return InviteVerdict.EXPIRED
        if self.is_exhausted:
            return InviteVerdict.MAX_USES_REACHED
        return InviteVerdict.VALID

    def has_been_used_by(self, user_id: UserId) -> bool:
        return user_id in self.used_by

    def record_use(self, user_id: UserId) -> "Invite":
        """Return a copy with one more use by ``user_id``.

        Deactivates the invite when the new count reaches the cap.
        """
        used_count = self.used_count + 1
        return self.model_copy(
            update={
                "used_count": used_count,
                "used_by": self.used_by | {user_id},
                "active": self.max_uses is None or used_count < self.max_uses,
            }
        )

    def deactivate(self) -> "Invite":
        return self.model_copy(update={"active": False})
