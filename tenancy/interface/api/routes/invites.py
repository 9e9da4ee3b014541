"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from tenancy.application.usecase.invite import (
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
    RevokeInviteRequest,
    RevokeInviteResponse,
    RevokeInviteUseCase,
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)
from tenancy.domain.value import UserId
from tenancy.interface.api.identity import get_current_user_id

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.get("/{code}", response_model=ValidateInviteResponse)
async def validate_invite(
    code: str,
    validate_invite_use_case: FromDishka[ValidateInviteUseCase],
) -> ValidateInviteResponse:
    """Preview an invite before joining.

    Public so the join page can render before the visitor signs in. An
    unusable invite is a normal answer here, not an error.

    Args:
        code: Invite code from the shared link
        validate_invite_use_case: Validate invite use case from DI

    Returns:
        Whether the invite can be redeemed, and why not if it cannot
    """
    return await validate_invite_use_case.execute(ValidateInviteRequest(code=code))


@router.post("/{code}/redeem", response_model=RedeemInviteResponse)
async def redeem_invite(
    code: str,
    redeem_invite_use_case: FromDishka[RedeemInviteUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> RedeemInviteResponse:
    """Join the invite's workspace as the current user."""
    return await redeem_invite_use_case.execute(
        RedeemInviteRequest(code=code, user_id=user_id)
    )


@router.post("/{code}/revoke", response_model=RevokeInviteResponse)
async def revoke_invite(
    code: str,
    revoke_invite_use_case: FromDishka[RevokeInviteUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> RevokeInviteResponse:
    """Deactivate an invite of a workspace the current user manages."""
    return await revoke_invite_use_case.execute(
        RevokeInviteRequest(code=code, requester_id=user_id)
    )
