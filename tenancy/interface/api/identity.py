"""Acting user resolution.

Authentication happens upstream; the gateway forwards the authenticated
user's ID in the ``X-User-Id`` header.
"""

from uuid import UUID

from fastapi import Header, HTTPException, status

from tenancy.domain.value import UserId


async def get_current_user_id(
    x_user_id: str | None = Header(default=None),
) -> UserId:
    """Read the acting user from the request headers.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return UserId(UUID(x_user_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID",
        )
