"""Unit of work interface.

A unit of work groups reads and conditional writes across the invite,
workspace and user stores and applies the writes all-or-nothing on
``commit``. Leaving the ``async with`` block without committing, or with an
exception, discards every write.

Usage:
    async with unit_of_work_factory() as uow:
        invite = await uow.invites.find_by_code(code)
        await uow.invites.update(invite.deactivate())
        await uow.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

from tenancy.domain.repository.invite import InviteRepository
from tenancy.domain.repository.user import UserRepository
from tenancy.domain.repository.workspace import WorkspaceRepository


class UnitOfWork(ABC):
    """Transaction spanning all three stores."""

    invites: InviteRepository
    workspaces: WorkspaceRepository
    users: UserRepository

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        # Rolling back after a commit is a no-op in every implementation
        await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        """Apply every staged write atomically.

        Raises:
            StaleRecordError: If any guarded record changed since it was read
            DuplicateRecordError: If an inserted key was taken concurrently
            StorageUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every write not yet committed."""
        pass


class UnitOfWorkFactory(ABC):
    """Opens a fresh unit of work per attempt."""

    @abstractmethod
    def __call__(self) -> UnitOfWork:
        pass
