"""In-memory unit of work for testing.

Writes are staged per unit of work and only reach the shared database on
commit. Commit re-checks every staged write against the committed version
and applies all of them or none, which gives the same observable behaviour
as a database transaction with version-guarded updates.
"""

import asyncio
from collections.abc import Hashable
from dataclasses import dataclass

from tenancy.domain.error import DuplicateRecordError, StaleRecordError
from tenancy.domain.model.common import VersionedModel
from tenancy.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory

from .database import InMemoryDatabase, Table
from .invite import InMemoryInviteRepository
from .user import InMemoryUserRepository
from .workspace import InMemoryWorkspaceRepository


@dataclass
class _StagedWrite:
    table: Table
    key: Hashable
    expected_version: int  # 0 means the record must not exist yet
    record: VersionedModel


def _check_version(write: _StagedWrite, current: VersionedModel | None) -> None:
    current_version = current.version if current is not None else 0
    if current_version == write.expected_version:
        return
    if write.expected_version == 0:
        raise DuplicateRecordError(write.table, str(write.key))
    raise StaleRecordError(write.table, str(write.key), write.expected_version)


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database
        self._staged: dict[tuple[Table, Hashable], _StagedWrite] = {}
        self.invites = InMemoryInviteRepository(self)
        self.workspaces = InMemoryWorkspaceRepository(self)
        self.users = InMemoryUserRepository(self)

    def read(self, table: Table, key: Hashable) -> VersionedModel | None:
        """Read a record, seeing this unit's own staged writes first."""
        staged = self._staged.get((table, key))
        if staged is not None:
            return staged.record
        return self.database.get(table, key)

    def scan(self, table: Table) -> list[VersionedModel]:
        """All records of a table as this unit of work sees them."""
        records = dict(self.database.tables[table])
        for (staged_table, key), write in self._staged.items():
            if staged_table == table:
                records[key] = write.record
        return list(records.values())

    def stage_insert(
        self, table: Table, key: Hashable, record: VersionedModel
    ) -> VersionedModel:
        if self.read(table, key) is not None:
            raise DuplicateRecordError(table, str(key))
        stored = record.model_copy(update={"version": 1})
        self._staged[(table, key)] = _StagedWrite(table, key, 0, stored)
        return stored

    def stage_update(
        self, table: Table, key: Hashable, record: VersionedModel
    ) -> VersionedModel:
        staged = self._staged.get((table, key))
        if staged is not None:
            # Second write to the same record inside one unit of work
            if record.version != staged.record.version:
                raise StaleRecordError(table, str(key), record.version)
            stored = record.model_copy(update={"version": staged.record.version})
            staged.record = stored
            return stored

        write = _StagedWrite(
            table,
            key,
            record.version,
            record.model_copy(update={"version": record.version + 1}),
        )
        # Fail early when a newer version is already committed
        _check_version(write, self.database.get(table, key))
        self._staged[(table, key)] = write
        return write.record

    async def commit(self) -> None:
        # Yield like a network round-trip would, so concurrent units of work
        # really do interleave between their reads and their commit.
        await asyncio.sleep(0)
        async with self.database.commit_lock:
            writes = list(self._staged.values())
            for write in writes:
                _check_version(write, self.database.get(write.table, write.key))
            for write in writes:
                self.database.tables[write.table][write.key] = write.record
        self._staged.clear()

    async def rollback(self) -> None:
        self._staged.clear()


class InMemoryUnitOfWorkFactory(UnitOfWorkFactory):
    """Opens in-memory units of work over one shared database."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def __call__(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self.database)
