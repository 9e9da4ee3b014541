"""Translate domain errors into HTTP responses.

Every ``DomainError`` kind maps to one status code and one message fit to
show an end user. The raw exception text stays in the logs.
"""

import logfire
from fastapi import Request, status
from fastapi.responses import JSONResponse

from tenancy.domain.error import DomainError, ErrorKind

ERROR_RESPONSES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.INVALID_INPUT: (status.HTTP_400_BAD_REQUEST, "The request is invalid."),
    ErrorKind.INVITE_NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "This invite code does not exist.",
    ),
    ErrorKind.INVITE_EXPIRED: (status.HTTP_410_GONE, "This invite has expired."),
    ErrorKind.INVITE_INACTIVE: (
        status.HTTP_410_GONE,
        "This invite is no longer active.",
    ),
    ErrorKind.INVITE_EXHAUSTED: (
        status.HTTP_410_GONE,
        "This invite has reached its maximum number of uses.",
    ),
    ErrorKind.ALREADY_REDEEMED: (
        status.HTTP_409_CONFLICT,
        "You have already used this invite.",
    ),
    ErrorKind.ALREADY_MEMBER: (
        status.HTTP_409_CONFLICT,
        "You are already a member of this workspace.",
    ),
    ErrorKind.WORKSPACE_GONE: (
        status.HTTP_410_GONE,
        "The workspace for this invite no longer exists.",
    ),
    ErrorKind.NOT_A_MEMBER: (
        status.HTTP_403_FORBIDDEN,
        "You are not a member of this workspace.",
    ),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Not found."),
    ErrorKind.NOT_AUTHORIZED: (
        status.HTTP_403_FORBIDDEN,
        "Only workspace owners and admins can manage invites.",
    ),
    ErrorKind.CONFLICT: (
        status.HTTP_409_CONFLICT,
        "Too many people are joining right now. Please try again.",
    ),
    ErrorKind.STORAGE_UNAVAILABLE: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "The service is temporarily unavailable.",
    ),
}


def error_response(error: DomainError) -> tuple[int, str]:
    """Status code and user-facing message for a domain error."""
    return ERROR_RESPONSES[error.kind]


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """FastAPI exception handler for ``DomainError``."""
    status_code, message = error_response(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            kind=exc.kind.value,
            error=str(exc),
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            kind=exc.kind.value,
            error=str(exc),
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "error": exc.kind.value},
    )
