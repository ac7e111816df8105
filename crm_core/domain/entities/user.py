"""
User Entity

Represents a person who can belong to multiple workspaces.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from crm_core.domain.base import utcnow

if TYPE_CHECKING:
    from .membership import Membership


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple workspaces.

    Business Rules:
    - Email is normalized (trimmed, lowercase) and unique across all users
    - password_hash is a bcrypt hash; None means an externally-authenticated account
    - selected_workspace_id is only a hint, memberships are the source of truth
    - Never hard-deleted
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: Optional[str] = Field(default=None, max_length=100)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    # Sticky workspace selection
    selected_workspace_id: Optional[UUID] = Field(
        default=None, foreign_key="workspaces.id"
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    memberships: list["Membership"] = Relationship(back_populates="user")

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)
