"""Domain services."""

from .base import Service
from .invite_service import InviteService, InviteValidation, invite_verdict
from .membership_service import MembershipService
from .workspace_service import WorkspaceService

__all__ = [
    "InviteService",
    "InviteValidation",
    "MembershipService",
    "Service",
    "WorkspaceService",
    "invite_verdict",
]
