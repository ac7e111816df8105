"""
Invitation Entity

Single-use links to join a workspace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from crm_core.domain.base import utcnow
from .enums import InvitationStatus, MembershipRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - single-use link to join a workspace.

    Business Rules:
    - Created by an OWNER of the workspace
    - Only the SHA-256 hash of the token is stored
    - Lifecycle: pending -> accepted | revoked; expired is derived, never written
    - Only terminal fields (accepted_at, accepted_by_user_id, revoked_at) change after issuance
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    role: MembershipRole = Field(nullable=False)
    created_by_user_id: UUID = Field(foreign_key="users.id", nullable=False)

    # Terminal fields
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    accepted_by_user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_invitation_expires_at", "expires_at"),)

    def effective_status(self, now: Optional[datetime] = None) -> InvitationStatus:
        """
        Classify the invitation at read time.

        Revocation and acceptance win over expiry, so a revoked invitation
        past its expiry still reports revoked.
        """
        if self.revoked_at is not None:
            return InvitationStatus.revoked
        if self.accepted_at is not None:
            return InvitationStatus.accepted
        if (now or utcnow()) > self.expires_at:
            return InvitationStatus.expired
        return InvitationStatus.pending
