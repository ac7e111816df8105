"""
Authorization Guard

Role checks and membership self-protection invariants.
Pure functions over already-fetched state: no I/O happens here.
"""

from dataclasses import dataclass
from uuid import UUID

from crm_core.domain.entities import Membership, MembershipRole
from crm_core.libs.result import Error, Result, Return

SELF_DEACTIVATION = "SELF_DEACTIVATION"
LAST_OWNER_VIOLATION = "LAST_OWNER_VIOLATION"


@dataclass(frozen=True)
class WorkspaceContext:
    """Tenant scope bound to the authenticated user for one request"""

    workspace_id: UUID
    workspace_name: str
    workspace_slug: str
    user_id: UUID
    role: MembershipRole


class AuthorizationError(Exception):
    """Raised when the caller's role does not allow the operation"""

    def __init__(self, required_role: MembershipRole):
        self.required_role = required_role
        super().__init__(f"{required_role.value} role required")


def require_role(context: WorkspaceContext, role: MembershipRole) -> None:
    if context.role != role:
        raise AuthorizationError(role)


def check_deactivation_invariants(
    target: Membership, acting_user_id: UUID, owner_count: int
) -> Result[None]:
    """
    Decide whether the target membership may be removed.

    Args:
        target: Membership about to be deactivated
        acting_user_id: User performing the deactivation
        owner_count: Current number of OWNER memberships in the workspace

    Returns:
        Ok when it is safe to delete the membership, else
        SELF_DEACTIVATION or LAST_OWNER_VIOLATION
    """
    # Self-protection wins even when the actor is the sole owner
    if target.user_id == acting_user_id:
        return Return.err(
            Error(SELF_DEACTIVATION, "You cannot deactivate your own membership")
        )

    if target.role == MembershipRole.owner and owner_count <= 1:
        return Return.err(
            Error(LAST_OWNER_VIOLATION, "A workspace must keep at least one owner")
        )

    return Return.ok(None)
