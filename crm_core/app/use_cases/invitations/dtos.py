"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for invitation domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class GenerateInviteResponse(BaseModel):
    """Response for generate invite use case. The link carries the only copy of the token."""

    invitation_id: str
    invite_link: str
    role: str
    expires_at: datetime


class InviteDetails(BaseModel):
    """Response for validate invite use case"""

    workspace_id: str
    workspace_name: str
    role: str


class AcceptInviteResponse(BaseModel):
    """Response for accept invite use case"""

    workspace_id: str
    workspace_name: str
    role: str
    already_member: bool


class RevokeInviteResponse(BaseModel):
    """Response for revoke invite use case"""

    status: str
    invitation_id: str


class InviteInfo(BaseModel):
    """Invitation entry for owners. Never includes the token."""

    id: str
    role: str
    status: str
    created_by_user_id: str
    created_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[str] = None
    revoked_at: Optional[datetime] = None


class InviteListResponse(BaseModel):
    """Response for list invites use case"""

    invitations: List[InviteInfo]
