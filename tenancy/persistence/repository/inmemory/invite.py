"""In-memory invite repository for testing."""

from typing import TYPE_CHECKING, Optional, cast

from tenancy.domain.model.invite import Invite
from tenancy.domain.repository.invite import InviteRepository
from tenancy.domain.value import InviteCode

if TYPE_CHECKING:
    from .unit_of_work import InMemoryUnitOfWork


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self, unit_of_work: "InMemoryUnitOfWork") -> None:
        self._uow = unit_of_work

    async def find_by_code(self, code: InviteCode) -> Optional[Invite]:
        """Find an invite by its code."""
        return cast(Optional[Invite], self._uow.read("invites", code.root))

    async def add(self, invite: Invite) -> Invite:
        """Stage a new invite."""
        return cast(Invite, self._uow.stage_insert("invites", invite.code.root, invite))

    async def update(self, invite: Invite) -> Invite:
        """Stage a version-guarded invite write."""
        return cast(Invite, self._uow.stage_update("invites", invite.code.root, invite))
