"""
Validate Invite Use Case

Read-only check of an invitation token, used before the user signs in or up.
"""

from crm_core.app.services.token_issuer import hash_token
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.base import utcnow
from crm_core.libs.result import Result, Return

from .checks import invalid_invitation, invitation_error
from .dtos import InviteDetails


class ValidateInviteUseCase:
    """
    Use case for validating an invitation token.

    Outcomes, in check order: INVALID (empty or unknown), REVOKED, USED,
    EXPIRED, else the workspace and role the invitation grants.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Invitation validation")
    async def execute(self, token: str) -> Result[InviteDetails]:
        if not token:
            return Return.err(invalid_invitation())

        async with self.uow:
            found = await self.uow.invitations.get_by_token_hash(hash_token(token))
            invitation, workspace = found if found else (None, None)

            error = invitation_error(invitation, utcnow())
            if error is not None:
                return Return.err(error)

            return Return.ok(
                InviteDetails(
                    workspace_id=str(workspace.id),
                    workspace_name=workspace.name,
                    role=invitation.role.value,
                )
            )
