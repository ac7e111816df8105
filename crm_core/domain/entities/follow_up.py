"""
FollowUp Entity

A dated reminder to get back to a client.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from crm_core.domain.base import utcnow
from .enums import FollowUpStatus


class FollowUp(SQLModel, table=True):
    """
    FollowUp entity - reminder attached to a client.

    Business Rules:
    - Carries the workspace_id of its client
    - Status is OPEN or DONE and can be flipped back and forth
    """

    __tablename__ = "follow_ups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)
    client_id: UUID = Field(foreign_key="clients.id", nullable=False, index=True)

    reason: str = Field(max_length=500)
    due_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    status: FollowUpStatus = Field(default=FollowUpStatus.open, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_follow_up_workspace_due", "workspace_id", "due_date"),)
