from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from crm_core.api.error import raise_for_error
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.follow_ups import (
    CreateFollowUpCommand,
    CreateFollowUpUseCase,
    DeleteFollowUpResponse,
    DeleteFollowUpUseCase,
    FollowUpInfo,
    FollowUpListResponse,
    ListFollowUpsUseCase,
    ToggleFollowUpUseCase,
    UpdateFollowUpCommand,
    UpdateFollowUpUseCase,
)
from crm_core.depends import get_unit_of_work, get_workspace_context
from crm_core.domain.authorization import WorkspaceContext

router = APIRouter(tags=["Follow-ups"])


class CreateFollowUpRequest(BaseModel):
    """Create follow-up HTTP request payload"""

    reason: str = Field(..., description="Why to get back to the client (1-500 chars)")
    due_date: datetime = Field(..., description="When the follow-up is due")


class UpdateFollowUpRequest(BaseModel):
    """Update follow-up HTTP request payload; omitted fields are left unchanged"""

    reason: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[str] = Field(None, description="OPEN or DONE")


@router.get("/follow-ups", status_code=status.HTTP_200_OK, response_model=FollowUpListResponse)
async def list_follow_ups(
    client_id: Optional[UUID] = Query(None, description="Only this client's follow-ups"),
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Follow-ups

    Earliest due first. Without client_id this is the workspace to-do list.
    """
    result = await ListFollowUpsUseCase(uow).execute(context, client_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/clients/{client_id}/follow-ups",
    status_code=status.HTTP_201_CREATED,
    response_model=FollowUpInfo,
)
async def create_follow_up(
    client_id: UUID,
    request: CreateFollowUpRequest,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Schedule Follow-up

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: Client missing or outside the current workspace
    """
    result = await CreateFollowUpUseCase(uow).execute(
        context, client_id, CreateFollowUpCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/follow-ups/{follow_up_id}", status_code=status.HTTP_200_OK, response_model=FollowUpInfo
)
async def update_follow_up(
    follow_up_id: UUID,
    request: UpdateFollowUpRequest,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateFollowUpUseCase(uow).execute(
        context, follow_up_id, UpdateFollowUpCommand(**request.model_dump(exclude_unset=True))
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/follow-ups/{follow_up_id}/toggle",
    status_code=status.HTTP_200_OK,
    response_model=FollowUpInfo,
)
async def toggle_follow_up(
    follow_up_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Flip between OPEN and DONE"""
    result = await ToggleFollowUpUseCase(uow).execute(context, follow_up_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/follow-ups/{follow_up_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteFollowUpResponse,
)
async def delete_follow_up(
    follow_up_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteFollowUpUseCase(uow).execute(context, follow_up_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
