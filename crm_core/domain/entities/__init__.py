"""
Workspace Core Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActivityType,
    ClientStatus,
    FollowUpStatus,
    InvitationStatus,
    MembershipRole,
)

# Export all entities
from .user import User
from .workspace import Workspace
from .membership import Membership
from .invitation import Invitation
from .password_reset_token import PasswordResetToken
from .client import Client
from .activity import Activity
from .follow_up import FollowUp

__all__ = [
    # Enums
    "MembershipRole",
    "InvitationStatus",
    "ClientStatus",
    "ActivityType",
    "FollowUpStatus",
    # Entities
    "User",
    "Workspace",
    "Membership",
    "Invitation",
    "PasswordResetToken",
    "Client",
    "Activity",
    "FollowUp",
]
