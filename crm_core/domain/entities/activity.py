"""
Activity Entity

Timeline entry (note, call, email, meeting) on a client.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from crm_core.domain.base import utcnow
from .enums import ActivityType


class Activity(SQLModel, table=True):
    """
    Activity entity - something that happened with a client.

    Business Rules:
    - Carries the workspace_id of its client
    - occurred_at defaults to the creation time and may be backdated
    - Immutable; only deletion is allowed
    """

    __tablename__ = "activities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)
    client_id: UUID = Field(foreign_key="clients.id", nullable=False)

    type: ActivityType = Field(nullable=False)
    content: str = Field(sa_column=Column(Text, nullable=False))

    occurred_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_activity_client_occurred", "client_id", "occurred_at"),)
