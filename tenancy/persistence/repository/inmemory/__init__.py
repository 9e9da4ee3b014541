"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .invite import InMemoryInviteRepository
from .unit_of_work import InMemoryUnitOfWork, InMemoryUnitOfWorkFactory
from .user import InMemoryUserRepository
from .workspace import InMemoryWorkspaceRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryInviteRepository",
    "InMemoryUnitOfWork",
    "InMemoryUnitOfWorkFactory",
    "InMemoryUserRepository",
    "InMemoryWorkspaceRepository",
]
