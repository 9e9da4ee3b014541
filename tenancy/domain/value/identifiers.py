"""Strongly typed identifiers for tenancy domain entities.

Using NewType for strong typing prevents mixing up a user id with a
workspace id at call sites that take both.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
WorkspaceId = NewType("WorkspaceId", UUID)
