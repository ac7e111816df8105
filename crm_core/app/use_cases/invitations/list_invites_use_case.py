"""
List Invites Use Case
"""

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary, unauthorized
from crm_core.domain.authorization import AuthorizationError, WorkspaceContext, require_role
from crm_core.domain.base import utcnow
from crm_core.domain.entities import MembershipRole
from crm_core.libs.result import Result, Return

from .dtos import InviteInfo, InviteListResponse


class ListInvitesUseCase:
    """Owner-only listing of the workspace's invitations with their derived status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Invitation listing")
    async def execute(self, context: WorkspaceContext) -> Result[InviteListResponse]:
        try:
            require_role(context, MembershipRole.owner)
        except AuthorizationError:
            return Return.err(unauthorized())

        async with self.uow:
            invitations = await self.uow.invitations.get_by_workspace_id(context.workspace_id)
            now = utcnow()

            return Return.ok(
                InviteListResponse(
                    invitations=[
                        InviteInfo(
                            id=str(invitation.id),
                            role=invitation.role.value,
                            status=invitation.effective_status(now).value,
                            created_by_user_id=str(invitation.created_by_user_id),
                            created_at=invitation.created_at,
                            expires_at=invitation.expires_at,
                            accepted_at=invitation.accepted_at,
                            accepted_by_user_id=(
                                str(invitation.accepted_by_user_id)
                                if invitation.accepted_by_user_id
                                else None
                            ),
                            revoked_at=invitation.revoked_at,
                        )
                        for invitation in invitations
                    ]
                )
            )
