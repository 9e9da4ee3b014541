"""Workspace routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from tenancy.application.usecase.invite import (
    GenerateInviteRequest,
    GenerateInviteResponse,
    GenerateInviteUseCase,
)
from tenancy.application.usecase.workspace import (
    CreateWorkspaceRequest,
    CreateWorkspaceResponse,
    CreateWorkspaceUseCase,
    ListWorkspacesRequest,
    ListWorkspacesResponse,
    ListWorkspacesUseCase,
    SwitchWorkspaceRequest,
    SwitchWorkspaceResponse,
    SwitchWorkspaceUseCase,
)
from tenancy.domain.value import UserId
from tenancy.interface.api.identity import get_current_user_id

router = APIRouter(prefix="/workspaces", tags=["workspaces"], route_class=DishkaRoute)


class CreateWorkspaceAPIRequest(BaseModel):
    """API request for creating a workspace."""

    name: str


class GenerateInviteAPIRequest(BaseModel):
    """API request for generating an invite.

    Omitted fields fall back to the configured default expiry and to
    unlimited uses.
    """

    expires_in_days: int | None = None
    max_uses: int | None = None


@router.post(
    "", response_model=CreateWorkspaceResponse, status_code=status.HTTP_201_CREATED
)
async def create_workspace(
    request: CreateWorkspaceAPIRequest,
    create_workspace_use_case: FromDishka[CreateWorkspaceUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> CreateWorkspaceResponse:
    """Create a workspace owned by the current user and select it."""
    return await create_workspace_use_case.execute(
        CreateWorkspaceRequest(owner_id=user_id, name=request.name)
    )


@router.get("", response_model=ListWorkspacesResponse)
async def list_workspaces(
    list_workspaces_use_case: FromDishka[ListWorkspacesUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> ListWorkspacesResponse:
    """List the current user's workspaces."""
    return await list_workspaces_use_case.execute(
        ListWorkspacesRequest(user_id=user_id)
    )


@router.post("/{workspace_id}/switch", response_model=SwitchWorkspaceResponse)
async def switch_workspace(
    workspace_id: UUID,
    switch_workspace_use_case: FromDishka[SwitchWorkspaceUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> SwitchWorkspaceResponse:
    """Select one of the current user's workspaces.

    Args:
        workspace_id: Workspace to select
        switch_workspace_use_case: Switch workspace use case from DI
        user_id: Acting user from the gateway header

    Returns:
        The user's new current workspace
    """
    return await switch_workspace_use_case.execute(
        SwitchWorkspaceRequest(user_id=user_id, workspace_id=workspace_id)
    )


@router.post(
    "/{workspace_id}/invites",
    response_model=GenerateInviteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_invite(
    workspace_id: UUID,
    request: GenerateInviteAPIRequest,
    generate_invite_use_case: FromDishka[GenerateInviteUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> GenerateInviteResponse:
    """Create an invite code for a workspace the current user manages.

    Args:
        workspace_id: Workspace the invite grants access to
        request: Optional expiry and usage cap
        generate_invite_use_case: Generate invite use case from DI
        user_id: Acting user from the gateway header

    Returns:
        The created invite with its code
    """
    return await generate_invite_use_case.execute(
        GenerateInviteRequest(
            workspace_id=workspace_id,
            requester_id=user_id,
            expires_in_days=request.expires_in_days,
            max_uses=request.max_uses,
        )
    )
