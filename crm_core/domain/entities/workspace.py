"""
Workspace Entity

Represents an isolated tenant; all CRM data is scoped to one workspace.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from crm_core.domain.base import utcnow

if TYPE_CHECKING:
    from .membership import Membership


class Workspace(SQLModel, table=True):
    """
    Workspace entity - isolated tenant.

    Business Rules:
    - Created at signup together with the creator's OWNER membership
    - Slug is unique; collisions are resolved by suffixing (-1, -2, ...)
    - Identity is immutable once created
    """

    __tablename__ = "workspaces"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    slug: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    memberships: list["Membership"] = Relationship(back_populates="workspace")
