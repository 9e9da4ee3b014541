"""Domain layer errors.

Every domain error carries an ``ErrorKind`` so callers can branch on the
kind of failure without parsing messages. Presentation layers turn kinds into
user-facing text.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Structured error kinds returned by the core."""

    INVALID_INPUT = "invalid_input"
    INVITE_NOT_FOUND = "invite_not_found"
    INVITE_EXPIRED = "invite_expired"
    INVITE_INACTIVE = "invite_inactive"
    INVITE_EXHAUSTED = "invite_exhausted"
    ALREADY_REDEEMED = "already_redeemed"
    ALREADY_MEMBER = "already_member"
    WORKSPACE_GONE = "workspace_gone"
    NOT_A_MEMBER = "not_a_member"
    NOT_FOUND = "not_found"
    NOT_AUTHORIZED = "not_authorized"
    CONFLICT = "conflict"
    STORAGE_UNAVAILABLE = "storage_unavailable"


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[ErrorKind]


class InvalidInputError(DomainError):
    """Raised when operation arguments are out of bounds."""

    kind = ErrorKind.INVALID_INPUT


class InviteNotFoundError(DomainError):
    """Raised when no invite exists for a code."""

    kind = ErrorKind.INVITE_NOT_FOUND

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invite not found: {code[:3]}...")


class InviteExpiredError(DomainError):
    kind = ErrorKind.INVITE_EXPIRED


class InviteInactiveError(DomainError):
    kind = ErrorKind.INVITE_INACTIVE


class InviteExhaustedError(DomainError):
    kind = ErrorKind.INVITE_EXHAUSTED


class AlreadyRedeemedError(DomainError):
    kind = ErrorKind.ALREADY_REDEEMED


class AlreadyMemberError(DomainError):
    kind = ErrorKind.ALREADY_MEMBER


class WorkspaceGoneError(DomainError):
    """Raised when an invite points at a workspace that no longer exists."""

    kind = ErrorKind.WORKSPACE_GONE


class NotAMemberError(DomainError):
    """Raised when a user acts on a workspace they do not belong to."""

    kind = ErrorKind.NOT_A_MEMBER

    def __init__(self, user_id: str, workspace_id: str):
        self.user_id = user_id
        self.workspace_id = workspace_id
        super().__init__(f"User {user_id} is not a member of workspace {workspace_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user lacks the workspace role an operation needs."""

    kind = ErrorKind.NOT_AUTHORIZED

    def __init__(self, action: str, workspace_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to {action} in workspace {workspace_id}"
        )


class ConflictError(DomainError):
    """Raised when concurrent writers keep colliding.

    Transient: the caller may retry the whole operation.
    """

    kind = ErrorKind.CONFLICT


class StaleRecordError(ConflictError):
    """Raised when a conditional write finds a newer version than was read."""

    def __init__(self, resource: str, key: str, expected_version: int):
        self.resource = resource
        self.key = key
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {key} changed since version {expected_version} was read"
        )


class DuplicateRecordError(ConflictError):
    """Raised when inserting a record whose key already exists."""

    def __init__(self, resource: str, key: str):
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} already exists: {key}")


class StorageUnavailableError(DomainError):
    """Raised when the persistent store cannot be reached.

    Fatal to the request; never retried by the core.
    """

    kind = ErrorKind.STORAGE_UNAVAILABLE
