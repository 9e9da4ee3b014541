"""In-memory user repository for testing."""

from typing import TYPE_CHECKING, Optional, cast

from tenancy.domain.model.user import User
from tenancy.domain.repository.user import UserRepository
from tenancy.domain.value import UserId

if TYPE_CHECKING:
    from .unit_of_work import InMemoryUnitOfWork


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, unit_of_work: "InMemoryUnitOfWork") -> None:
        self._uow = unit_of_work

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user's membership record."""
        return cast(Optional[User], self._uow.read("users", user_id))

    async def add(self, user: User) -> User:
        """Stage a first membership record."""
        return cast(User, self._uow.stage_insert("users", user.id, user))

    async def update(self, user: User) -> User:
        """Stage a version-guarded membership write."""
        return cast(User, self._uow.stage_update("users", user.id, user))
