"""
Membership Entity

Links User to Workspace with a role.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from crm_core.domain.base import utcnow
from .enums import MembershipRole

if TYPE_CHECKING:
    from .user import User
    from .workspace import Workspace


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Workspace with a role.

    Business Rules:
    - One user can be member of multiple workspaces
    - (user_id, workspace_id) must be unique
    - A workspace always keeps at least one OWNER (checked on deactivation)
    - Deactivation deletes the row
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    user: "User" = Relationship(back_populates="memberships")
    workspace: "Workspace" = Relationship(back_populates="memberships")

    __table_args__ = (
        Index("idx_membership_user_workspace", "user_id", "workspace_id", unique=True),
        Index("idx_membership_workspace_role", "workspace_id", "role"),
    )
