from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from crm_core.api.error import raise_for_error
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.activities import (
    ActivityInfo,
    ActivityListResponse,
    CreateActivityCommand,
    CreateActivityUseCase,
    DeleteActivityResponse,
    DeleteActivityUseCase,
    ListActivitiesUseCase,
)
from crm_core.depends import get_unit_of_work, get_workspace_context
from crm_core.domain.authorization import WorkspaceContext

router = APIRouter(tags=["Activities"])


class CreateActivityRequest(BaseModel):
    """Create activity HTTP request payload"""

    type: str = Field(..., description="NOTE, CALL, EMAIL or MEETING")
    content: str = Field(..., description="What happened (1-10000 chars)")
    occurred_at: Optional[datetime] = Field(None, description="Defaults to now")


@router.get(
    "/clients/{client_id}/activities",
    status_code=status.HTTP_200_OK,
    response_model=ActivityListResponse,
)
async def list_activities(
    client_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Client timeline, most recent first"""
    result = await ListActivitiesUseCase(uow).execute(context, client_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/clients/{client_id}/activities",
    status_code=status.HTTP_201_CREATED,
    response_model=ActivityInfo,
)
async def create_activity(
    client_id: UUID,
    request: CreateActivityRequest,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Log Activity

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: Client missing or outside the current workspace
    """
    result = await CreateActivityUseCase(uow).execute(
        context, client_id, CreateActivityCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/activities/{activity_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteActivityResponse,
)
async def delete_activity(
    activity_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteActivityUseCase(uow).execute(context, activity_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
