"""
Client Entity

A customer or lead tracked by a workspace.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from crm_core.domain.base import utcnow
from .enums import ClientStatus


class Client(SQLModel, table=True):
    """
    Client entity - customer or lead owned by exactly one workspace.

    Business Rules:
    - Every read and write is filtered by workspace_id; a client of another
      workspace is indistinguishable from a missing one
    - Empty email, phone and note are stored as NULL
    - Deleting a client deletes its activities and follow-ups
    """

    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    status: ClientStatus = Field(default=ClientStatus.prospect, nullable=False)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    note: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_client_workspace_updated", "workspace_id", "updated_at"),)
