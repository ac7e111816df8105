"""
Client Use Case DTOs (Data Transfer Objects)

Commands and responses for client management.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from crm_core.domain.entities import Client


class CreateClientCommand(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str = "PROSPECT"
    tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None


class UpdateClientCommand(BaseModel):
    """Partial update; only fields explicitly provided are applied"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    tags: Optional[List[str]] = None
    note: Optional[str] = None


class ClientInfo(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str
    tags: List[str]
    note: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, client: Client) -> "ClientInfo":
        return cls(
            id=str(client.id),
            name=client.name,
            email=client.email,
            phone=client.phone,
            status=client.status.value,
            tags=list(client.tags or []),
            note=client.note,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


class ClientListResponse(BaseModel):
    """Response for list clients use case"""

    clients: List[ClientInfo]


class DeleteClientResponse(BaseModel):
    status: str
    client_id: str
