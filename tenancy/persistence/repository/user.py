"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.error import DuplicateRecordError, StaleRecordError
from tenancy.domain.model import User
from tenancy.domain.repository import UserRepository
from tenancy.domain.value import UserId
from tenancy.persistence.mappers import row_to_user, user_to_dict
from tenancy.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user's membership record.

        Args:
            user_id: User ID to look up

        Returns:
            User if a record exists, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def add(self, user: User) -> User:
        """Insert a first membership record."""
        stmt = insert(users_table).values(**user_to_dict(user), version=1)
        try:
            await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateRecordError("users", str(user.id)) from e
        return user.model_copy(update={"version": 1})

    async def update(self, user: User) -> User:
        """Write the record only if its version is unchanged."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user.id, users_table.c.version == user.version)
            .values(**user_to_dict(user), version=user.version + 1)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            raise StaleRecordError("users", str(user.id), user.version)
        return user.model_copy(update={"version": user.version + 1})
