"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Turns one API request into domain service calls.

    Use cases own request parsing and permission checks for invites and
    workspaces; the domain services below them stay permission-free.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
