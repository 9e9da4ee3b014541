"""PostgreSQL repository implementations."""

from tenancy.persistence.repository.invite import PostgresInviteRepository
from tenancy.persistence.repository.unit_of_work import (
    PostgresUnitOfWork,
    PostgresUnitOfWorkFactory,
)
from tenancy.persistence.repository.user import PostgresUserRepository
from tenancy.persistence.repository.workspace import PostgresWorkspaceRepository

__all__ = [
    "PostgresInviteRepository",
    "PostgresUnitOfWork",
    "PostgresUnitOfWorkFactory",
    "PostgresUserRepository",
    "PostgresWorkspaceRepository",
]
