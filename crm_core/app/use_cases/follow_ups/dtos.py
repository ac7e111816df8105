"""
Follow-up Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from crm_core.domain.entities import Client, FollowUp


class CreateFollowUpCommand(BaseModel):
    reason: str
    due_date: datetime


class UpdateFollowUpCommand(BaseModel):
    """Partial update; only fields explicitly provided are applied"""

    reason: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[str] = None


class FollowUpInfo(BaseModel):
    id: str
    client_id: str
    client_name: str
    reason: str
    due_date: datetime
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, follow_up: FollowUp, client: Client) -> "FollowUpInfo":
        return cls(
            id=str(follow_up.id),
            client_id=str(client.id),
            client_name=client.name,
            reason=follow_up.reason,
            due_date=follow_up.due_date,
            status=follow_up.status.value,
            created_at=follow_up.created_at,
        )


class FollowUpListResponse(BaseModel):
    """Follow-ups ordered by due date, earliest first"""

    follow_ups: List[FollowUpInfo]


class DeleteFollowUpResponse(BaseModel):
    status: str
    follow_up_id: str
