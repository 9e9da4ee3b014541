"""Domain model entities for workspace membership."""

from tenancy.domain.model.invite import Invite
from tenancy.domain.model.user import User
from tenancy.domain.model.workspace import Workspace

__all__ = [
    "Invite",
    "User",
    "Workspace",
]
