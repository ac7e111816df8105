"""
Workspace Use Case DTOs (Data Transfer Objects)

Response classes for workspace selection and member management.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class WorkspaceInfo(BaseModel):
    """Workspace as seen by one of its members"""

    id: str
    name: str
    slug: str
    role: str


class WorkspaceSummary(WorkspaceInfo):
    """Entry of the workspace switcher"""

    is_current: bool = False


class WorkspaceListResponse(BaseModel):
    """Response for list workspaces use case"""

    workspaces: List[WorkspaceSummary]


class MemberInfo(BaseModel):
    """Member of the current workspace"""

    membership_id: str
    user_id: str
    email: str
    name: Optional[str] = None
    role: str
    joined_at: datetime


class MemberListResponse(BaseModel):
    """Response for list members use case"""

    members: List[MemberInfo]


class DeactivateMemberResponse(BaseModel):
    """Response for deactivate member use case"""

    status: str
    membership_id: str
