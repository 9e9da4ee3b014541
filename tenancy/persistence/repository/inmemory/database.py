"""In-memory store shared by in-memory units of work."""

import asyncio
from collections.abc import Hashable
from typing import Literal

from tenancy.domain.model.common import VersionedModel

Table = Literal["invites", "workspaces", "users"]


class InMemoryDatabase:
    """Committed records, one dict per table, keyed by primary key.

    Records are immutable models, so readers can hold on to them without
    copying. Only ``InMemoryUnitOfWork.commit`` mutates the tables.
    """

    def __init__(self) -> None:
        self.tables: dict[Table, dict[Hashable, VersionedModel]] = {
            "invites": {},
            "workspaces": {},
            "users": {},
        }
        self.commit_lock = asyncio.Lock()

    def get(self, table: Table, key: Hashable) -> VersionedModel | None:
        return self.tables[table].get(key)
