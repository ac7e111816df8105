from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from crm_core.api.error import raise_for_error
from crm_core.api.utils.workspace_cookie import set_preference_cookie
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.invitations import (
    AcceptInviteResponse,
    AcceptInviteUseCase,
    GenerateInviteResponse,
    GenerateInviteUseCase,
    InviteDetails,
    InviteListResponse,
    ListInvitesUseCase,
    RevokeInviteResponse,
    RevokeInviteUseCase,
    ValidateInviteUseCase,
)
from crm_core.depends import get_current_user, get_unit_of_work, get_workspace_context
from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.entities import MembershipRole

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class GenerateInviteRequest(BaseModel):
    """Generate invitation HTTP request payload"""

    role: str = Field(MembershipRole.member.value, description="OWNER or MEMBER")


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=GenerateInviteResponse
)
async def generate_invite(
    request: GenerateInviteRequest,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Generate Invitation

    Returns the invite link; the token inside it is not stored anywhere.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (unknown role)
        - 403 Forbidden: Not an owner
    """
    result = await GenerateInviteUseCase(uow).execute(context, request.role)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=InviteListResponse)
async def list_invites(
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListInvitesUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/validate", status_code=status.HTTP_200_OK, response_model=InviteDetails)
async def validate_invite(
    token: str = Query("", description="Invitation token"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Validate Invitation

    Public, read only. Lets the accept page show the workspace name before
    the user signs in.

    Raises:
        - 400 Bad Request: INVALID
        - 409 Conflict: USED
        - 410 Gone: REVOKED, EXPIRED
    """
    result = await ValidateInviteUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


class AcceptInviteRequest(BaseModel):
    """
    Accept invitation HTTP request payload

    Validates incoming request for accepting an invitation.
    """

    token: str = Field(..., description="Invitation token")


@router.post("/accept", status_code=status.HTTP_200_OK, response_model=AcceptInviteResponse)
async def accept_invite(
    request: AcceptInviteRequest,
    response: Response,
    user_id: UUID = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Joins the workspace (or confirms an existing membership) and selects it.

    Raises:
        - 400 Bad Request: INVALID
        - 401 Unauthorized: Invalid or expired JWT
        - 409 Conflict: USED
        - 410 Gone: REVOKED, EXPIRED
    """
    result = await AcceptInviteUseCase(uow).execute(request.token, user_id)
    if result.is_err():
        raise_for_error(result.error)

    set_preference_cookie(response, user_id, UUID(result.value.workspace_id))

    return result.value


@router.delete(
    "/{invitation_id}", status_code=status.HTTP_200_OK, response_model=RevokeInviteResponse
)
async def revoke_invite(
    invitation_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Invitation

    Raises:
        - 403 Forbidden: Not an owner, or invitation outside the workspace
        - 409 Conflict: USED
    """
    result = await RevokeInviteUseCase(uow).execute(context, invitation_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
