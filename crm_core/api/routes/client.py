from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from crm_core.api.error import raise_for_error
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.clients import (
    ClientInfo,
    ClientListResponse,
    CreateClientCommand,
    CreateClientUseCase,
    DeleteClientResponse,
    DeleteClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    UpdateClientCommand,
    UpdateClientUseCase,
)
from crm_core.depends import get_unit_of_work, get_workspace_context
from crm_core.domain.authorization import WorkspaceContext

router = APIRouter(prefix="/clients", tags=["Clients"])


class CreateClientRequest(BaseModel):
    """
    Create client HTTP request payload

    Empty strings for email, phone and note are accepted and stored as null.
    """

    name: str = Field(..., description="Client name (1-255 chars)")
    email: Optional[str] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone (max 50 chars)")
    status: str = Field("PROSPECT", description="PROSPECT, ACTIVE or INACTIVE")
    tags: List[str] = Field(default_factory=list, description="Free-form labels")
    note: Optional[str] = Field(None, description="Free text (max 5000 chars)")


class UpdateClientRequest(BaseModel):
    """Update client HTTP request payload; omitted fields are left unchanged"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    tags: Optional[List[str]] = None
    note: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=ClientListResponse)
async def list_clients(
    search: Optional[str] = Query(None, description="Substring of name, email or phone"),
    status_filter: Optional[str] = Query(None, alias="status", description="Status or 'all'"),
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Clients

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (unknown status)
        - 409 Conflict: NO_WORKSPACE
    """
    result = await ListClientsUseCase(uow).execute(context, search, status_filter)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientInfo)
async def create_client(
    request: CreateClientRequest,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Client

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
    """
    result = await CreateClientUseCase(uow).execute(
        context, CreateClientCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{client_id}", status_code=status.HTTP_200_OK, response_model=ClientInfo)
async def get_client(
    client_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Client

    Raises:
        - 403 Forbidden: Client missing or outside the current workspace
    """
    result = await GetClientUseCase(uow).execute(context, client_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{client_id}", status_code=status.HTTP_200_OK, response_model=ClientInfo)
async def update_client(
    client_id: UUID,
    request: UpdateClientRequest,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Client

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: Client missing or outside the current workspace
    """
    result = await UpdateClientUseCase(uow).execute(
        context, client_id, UpdateClientCommand(**request.model_dump(exclude_unset=True))
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{client_id}", status_code=status.HTTP_200_OK, response_model=DeleteClientResponse
)
async def delete_client(
    client_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Client

    Activities and follow-ups of the client are deleted with it.

    Raises:
        - 403 Forbidden: Client missing or outside the current workspace
    """
    result = await DeleteClientUseCase(uow).execute(context, client_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
