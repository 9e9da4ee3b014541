"""Invite repository interface."""

from abc import ABC, abstractmethod

from tenancy.domain.model.invite import Invite
from tenancy.domain.value import InviteCode


class InviteRepository(ABC):
    """Repository for Invite entity.

    Writes are conditional: ``update`` only succeeds while the stored version
    still equals the version the invite was read at.
    """

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> Invite | None:
        """Find an invite by code.

        Args:
            code: The invite code

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, invite: Invite) -> Invite:
        """Insert a new invite, stored as version 1.

        Args:
            invite: The invite to insert

        Returns:
            The stored invite

        Raises:
            DuplicateRecordError: If an invite with the same code exists
        """
        pass

    @abstractmethod
    async def update(self, invite: Invite) -> Invite:
        """Write an invite if nobody else wrote it since it was read.

        Args:
            invite: New invite state, carrying the version it was read at

        Returns:
            The stored invite with its version incremented

        Raises:
            StaleRecordError: If the stored version no longer matches
        """
        pass
