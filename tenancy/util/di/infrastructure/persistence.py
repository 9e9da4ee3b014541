"""Persistence infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tenancy.config import Settings
from tenancy.domain.repository import UnitOfWorkFactory
from tenancy.persistence.database import create_engine, create_session_factory
from tenancy.persistence.repository import PostgresUnitOfWorkFactory
from tenancy.util.di.base import ProviderBase
from tenancy.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_unit_of_work_factory(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> UnitOfWorkFactory:
        """Provide the factory services open transactions with.

        Each unit of work owns one session and commits or rolls back on its
        own, independent of the request lifecycle.
        """
        return PostgresUnitOfWorkFactory(session_factory)
