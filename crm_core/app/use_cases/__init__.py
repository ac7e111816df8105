"""
Use Cases

Organized into domain folders:
- auth/: Signup, login and password lifecycle
- workspaces/: Workspace resolution, switching and members
- invitations/: Invitation lifecycle
- clients/, activities/, follow_ups/: CRM data of the current workspace
"""

from .auth import (
    SignupUseCase,
    RegisterUserUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    ChangePasswordUseCase,
)
from .workspaces import (
    ResolveWorkspaceUseCase,
    SwitchWorkspaceUseCase,
    ListWorkspacesUseCase,
    ListMembersUseCase,
    DeactivateMemberUseCase,
)
from .invitations import (
    GenerateInviteUseCase,
    ValidateInviteUseCase,
    AcceptInviteUseCase,
    RevokeInviteUseCase,
    ListInvitesUseCase,
)
from .clients import (
    ListClientsUseCase,
    GetClientUseCase,
    CreateClientUseCase,
    UpdateClientUseCase,
    DeleteClientUseCase,
)
from .activities import (
    ListActivitiesUseCase,
    CreateActivityUseCase,
    DeleteActivityUseCase,
)
from .follow_ups import (
    ListFollowUpsUseCase,
    CreateFollowUpUseCase,
    UpdateFollowUpUseCase,
    ToggleFollowUpUseCase,
    DeleteFollowUpUseCase,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "RegisterUserUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "ChangePasswordUseCase",
    # Workspaces
    "ResolveWorkspaceUseCase",
    "SwitchWorkspaceUseCase",
    "ListWorkspacesUseCase",
    "ListMembersUseCase",
    "DeactivateMemberUseCase",
    # Invitations
    "GenerateInviteUseCase",
    "ValidateInviteUseCase",
    "AcceptInviteUseCase",
    "RevokeInviteUseCase",
    "ListInvitesUseCase",
    # Clients
    "ListClientsUseCase",
    "GetClientUseCase",
    "CreateClientUseCase",
    "UpdateClientUseCase",
    "DeleteClientUseCase",
    # Activities
    "ListActivitiesUseCase",
    "CreateActivityUseCase",
    "DeleteActivityUseCase",
    # Follow-ups
    "ListFollowUpsUseCase",
    "CreateFollowUpUseCase",
    "UpdateFollowUpUseCase",
    "ToggleFollowUpUseCase",
    "DeleteFollowUpUseCase",
]
