"""
Activity Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from crm_core.domain.entities import Activity


class CreateActivityCommand(BaseModel):
    type: str
    content: str
    occurred_at: Optional[datetime] = None


class ActivityInfo(BaseModel):
    id: str
    client_id: str
    type: str
    content: str
    occurred_at: datetime
    created_at: datetime

    @classmethod
    def from_entity(cls, activity: Activity) -> "ActivityInfo":
        return cls(
            id=str(activity.id),
            client_id=str(activity.client_id),
            type=activity.type.value,
            content=activity.content,
            occurred_at=activity.occurred_at,
            created_at=activity.created_at,
        )


class ActivityListResponse(BaseModel):
    """Client timeline, most recent first"""

    activities: List[ActivityInfo]


class DeleteActivityResponse(BaseModel):
    status: str
    activity_id: str
