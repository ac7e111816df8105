"""
Invitation Use Cases

Issue, validate, redeem, revoke and list workspace invitations.
"""

from .generate_invite_use_case import GenerateInviteUseCase
from .validate_invite_use_case import ValidateInviteUseCase
from .accept_invite_use_case import AcceptInviteUseCase
from .revoke_invite_use_case import RevokeInviteUseCase
from .list_invites_use_case import ListInvitesUseCase
from .dtos import (
    AcceptInviteResponse,
    GenerateInviteResponse,
    InviteDetails,
    InviteInfo,
    InviteListResponse,
    RevokeInviteResponse,
)

__all__ = [
    "GenerateInviteUseCase",
    "ValidateInviteUseCase",
    "AcceptInviteUseCase",
    "RevokeInviteUseCase",
    "ListInvitesUseCase",
    "GenerateInviteResponse",
    "InviteDetails",
    "AcceptInviteResponse",
    "RevokeInviteResponse",
    "InviteInfo",
    "InviteListResponse",
]
