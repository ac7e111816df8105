"""
Workspace Core Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within a workspace"""

    owner = "OWNER"
    member = "MEMBER"


class InvitationStatus(str, Enum):
    """
    Effective invitation status.

    Derived at read time from the invitation timestamps, never stored.
    """

    pending = "pending"
    accepted = "accepted"
    revoked = "revoked"
    expired = "expired"


class ClientStatus(str, Enum):
    """Where a client stands in the sales pipeline"""

    prospect = "PROSPECT"
    active = "ACTIVE"
    inactive = "INACTIVE"


class ActivityType(str, Enum):
    """Kind of interaction logged on a client timeline"""

    note = "NOTE"
    call = "CALL"
    email = "EMAIL"
    meeting = "MEETING"


class FollowUpStatus(str, Enum):
    open = "OPEN"
    done = "DONE"

    def toggled(self) -> "FollowUpStatus":
        return FollowUpStatus.done if self is FollowUpStatus.open else FollowUpStatus.open
