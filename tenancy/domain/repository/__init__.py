"""Repository interfaces for the tenancy domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tenancy.domain.repository.invite import InviteRepository
from tenancy.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from tenancy.domain.repository.user import UserRepository
from tenancy.domain.repository.workspace import WorkspaceRepository

__all__ = [
    "InviteRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "UserRepository",
    "WorkspaceRepository",
]
