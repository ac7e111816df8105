"""
Outcome of presenting an invitation token.
"""

from datetime import datetime
from typing import Optional

from crm_core.app.use_cases.errors import EXPIRED, INVALID, REVOKED, USED
from crm_core.domain.entities import Invitation, InvitationStatus
from crm_core.libs.result import Error

_ERRORS = {
    InvitationStatus.revoked: Error(REVOKED, "This invitation has been revoked"),
    InvitationStatus.accepted: Error(USED, "This invitation has already been used"),
    InvitationStatus.expired: Error(EXPIRED, "This invitation has expired"),
}


def invalid_invitation() -> Error:
    return Error(INVALID, "Invalid invitation link")


def invitation_error(invitation: Optional[Invitation], now: datetime) -> Optional[Error]:
    """Existence, then revoked, then accepted, then expired. None means redeemable."""
    if invitation is None:
        return invalid_invitation()
    return _ERRORS.get(invitation.effective_status(now))
