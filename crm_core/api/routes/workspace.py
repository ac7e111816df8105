from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from crm_core.api.error import raise_for_error
from crm_core.api.utils.workspace_cookie import set_preference_cookie
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.workspaces import (
    DeactivateMemberResponse,
    DeactivateMemberUseCase,
    ListMembersUseCase,
    ListWorkspacesUseCase,
    MemberListResponse,
    SwitchWorkspaceUseCase,
    WorkspaceInfo,
    WorkspaceListResponse,
)
from crm_core.depends import get_current_user, get_unit_of_work, get_workspace_context
from crm_core.domain.authorization import WorkspaceContext

router = APIRouter(prefix="/workspaces", tags=["Workspace"])


@router.get("", status_code=status.HTTP_200_OK, response_model=WorkspaceListResponse)
async def list_workspaces(
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Workspace switcher: every workspace of the user, current one flagged"""
    result = await ListWorkspacesUseCase(uow).execute(context.user_id, context.workspace_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/current", status_code=status.HTTP_200_OK, response_model=WorkspaceInfo)
async def current_workspace(context: WorkspaceContext = Depends(get_workspace_context)):
    """
    Current Workspace

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 409 Conflict: NO_WORKSPACE (user needs onboarding)
    """
    return WorkspaceInfo(
        id=str(context.workspace_id),
        name=context.workspace_name,
        slug=context.workspace_slug,
        role=context.role.value,
    )


class SwitchWorkspaceRequest(BaseModel):
    """
    Switch workspace HTTP request payload

    Validates incoming request for switching the current workspace.
    """

    workspace_id: UUID = Field(..., description="Target workspace ID")


@router.post("/switch", status_code=status.HTTP_200_OK, response_model=WorkspaceInfo)
async def switch_workspace(
    request: SwitchWorkspaceRequest,
    response: Response,
    user_id: UUID = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Switch Workspace

    Persists the selection and re-issues the signed preference cookie.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Not a member of the target workspace
    """
    result = await SwitchWorkspaceUseCase(uow).execute(user_id, request.workspace_id)
    if result.is_err():
        raise_for_error(result.error)

    set_preference_cookie(response, user_id, request.workspace_id)

    return result.value


@router.get(
    "/current/members", status_code=status.HTTP_200_OK, response_model=MemberListResponse
)
async def list_members(
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMembersUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/current/members/{membership_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeactivateMemberResponse,
)
async def deactivate_member(
    membership_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate Member

    Raises:
        - 400 Bad Request: SELF_DEACTIVATION
        - 403 Forbidden: Not an owner, or membership outside the workspace
        - 409 Conflict: LAST_OWNER_VIOLATION
    """
    result = await DeactivateMemberUseCase(uow).execute(context, membership_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
