"""
Revoke Invite Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import NOT_FOUND, USED, server_error_boundary, unauthorized
from crm_core.domain.authorization import AuthorizationError, WorkspaceContext, require_role
from crm_core.domain.base import utcnow
from crm_core.domain.entities import MembershipRole
from crm_core.libs.result import Error, Result, Return

from .dtos import RevokeInviteResponse

logger = logging.getLogger(__name__)


class RevokeInviteUseCase:
    """
    Use case for revoking a pending invitation.

    Business Rules:
    - Only owners can revoke
    - Invitation must belong to the current workspace (NOT_FOUND otherwise)
    - Accepted invitations cannot be revoked (USED)
    - Revoking twice keeps the first revoked_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Invitation revocation")
    async def execute(
        self, context: WorkspaceContext, invitation_id: UUID
    ) -> Result[RevokeInviteResponse]:
        try:
            require_role(context, MembershipRole.owner)
        except AuthorizationError:
            return Return.err(unauthorized())

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.workspace_id != context.workspace_id:
                return Return.err(Error(NOT_FOUND, "Invitation not found"))

            if invitation.accepted_at is not None:
                return Return.err(Error(USED, "This invitation has already been used"))

            if invitation.revoked_at is None:
                invitation.revoked_at = utcnow()
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                logger.info("Invitation %s revoked by user %s", invitation.id, context.user_id)

            return Return.ok(
                RevokeInviteResponse(status="revoked", invitation_id=str(invitation.id))
            )
