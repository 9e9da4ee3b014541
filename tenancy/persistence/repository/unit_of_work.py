"""PostgreSQL unit of work.

One AsyncSession, and so one database transaction, per unit of work. The
repositories issue version-guarded UPDATEs inside that transaction; commit
makes all of them visible at once and any exit without commit rolls all of
them back.
"""

from types import TracebackType
from typing import Optional

import logfire
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tenancy.domain.error import StorageUnavailableError
from tenancy.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory

from .invite import PostgresInviteRepository
from .user import PostgresUserRepository
from .workspace import PostgresWorkspaceRepository


def _is_storage_failure(exc: Optional[BaseException]) -> bool:
    if isinstance(exc, IntegrityError):
        return False
    return isinstance(exc, (DBAPIError, OSError))


class PostgresUnitOfWork(UnitOfWork):
    """PostgreSQL implementation of UnitOfWork."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self.session = self.session_factory()
        self.invites = PostgresInviteRepository(self.session)
        self.workspaces = PostgresWorkspaceRepository(self.session)
        self.users = PostgresUserRepository(self.session)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        cleanup_error: Optional[BaseException] = None
        try:
            try:
                await self.rollback()
            finally:
                await self.session.close()
        except (DBAPIError, OSError) as e:
            if not _is_storage_failure(e):
                raise
            cleanup_error = e

        failure = exc if _is_storage_failure(exc) else cleanup_error
        if failure is not None:
            logfire.error(
                "Database unavailable",
                error=str(failure),
                error_type=type(failure).__name__,
            )
            raise StorageUnavailableError("Database unavailable") from failure

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


class PostgresUnitOfWorkFactory(UnitOfWorkFactory):
    """Opens PostgreSQL units of work from a session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    def __call__(self) -> PostgresUnitOfWork:
        return PostgresUnitOfWork(self.session_factory)
