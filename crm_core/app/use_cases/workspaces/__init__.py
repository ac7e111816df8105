"""
Workspace Use Cases

Workspace resolution, switching and member management.
"""

from .resolve_workspace_use_case import ResolveWorkspaceUseCase
from .switch_workspace_use_case import SwitchWorkspaceUseCase
from .list_workspaces_use_case import ListWorkspacesUseCase
from .list_members_use_case import ListMembersUseCase
from .deactivate_member_use_case import DeactivateMemberUseCase
from .dtos import (
    DeactivateMemberResponse,
    MemberInfo,
    MemberListResponse,
    WorkspaceInfo,
    WorkspaceListResponse,
    WorkspaceSummary,
)

__all__ = [
    "ResolveWorkspaceUseCase",
    "SwitchWorkspaceUseCase",
    "ListWorkspacesUseCase",
    "ListMembersUseCase",
    "DeactivateMemberUseCase",
    "WorkspaceInfo",
    "WorkspaceSummary",
    "WorkspaceListResponse",
    "MemberInfo",
    "MemberListResponse",
    "DeactivateMemberResponse",
]
