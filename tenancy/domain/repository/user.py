"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tenancy.domain.model.user import User
from tenancy.domain.value import UserId


class UserRepository(ABC):
    """Repository for users' workspace memberships."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user's membership record.

        Args:
            user_id: The user's unique identifier

        Returns:
            The record if one was ever written, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert the first membership record for a user, stored as version 1.

        Raises:
            DuplicateRecordError: If a record for the user already exists
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Conditionally write a user's membership record.

        Raises:
            StaleRecordError: If the stored version no longer matches
        """
        pass

    async def get_or_new(self, user_id: UserId) -> User:
        """Return the stored record, or an unsaved empty one."""
        user = await self.find_by_id(user_id)
        return user if user is not None else User(id=user_id)

    async def save(self, user: User) -> User:
        """Insert a never-stored record (version 0), else update it."""
        if user.version == 0:
            return await self.add(user)
        return await self.update(user)
