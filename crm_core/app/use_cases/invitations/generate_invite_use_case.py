"""
Generate Invite Use Case

Handles issuing invitation links for the current workspace.
"""

import logging
from datetime import timedelta
from urllib.parse import urlencode

from config import ApplicationConfig
from crm_core.app.services.token_issuer import issue_token
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import VALIDATION_ERROR, server_error_boundary, unauthorized
from crm_core.domain.authorization import AuthorizationError, WorkspaceContext, require_role
from crm_core.domain.base import utcnow
from crm_core.domain.entities import Invitation, MembershipRole
from crm_core.libs.result import Error, Result, Return

from .dtos import GenerateInviteResponse

logger = logging.getLogger(__name__)


def build_invite_link(app_url: str, raw_token: str) -> str:
    return f"{app_url.rstrip('/')}/accept-invite?{urlencode({'token': raw_token})}"


class GenerateInviteUseCase:
    """
    Use case for generating a workspace invitation.

    Business Rules:
    - Only owners can invite
    - Role must be OWNER or MEMBER (default MEMBER)
    - Invitation expires after INVITE_EXPIRY_DAYS
    - Only the SHA-256 hash of the token is persisted; the raw token
      leaves the system once, inside the returned link
    """

    def __init__(self, uow: UnitOfWork, config=ApplicationConfig):
        self.uow = uow
        self.config = config

    @server_error_boundary("Invitation generation")
    async def execute(
        self, context: WorkspaceContext, role: str = MembershipRole.member.value
    ) -> Result[GenerateInviteResponse]:
        """
        Execute generate invite use case.

        Args:
            context: Workspace context of the inviting user
            role: Role granted on acceptance (OWNER or MEMBER)

        Returns:
            Result with GenerateInviteResponse, or Error(UNAUTHORIZED | VALIDATION_ERROR)
        """
        try:
            require_role(context, MembershipRole.owner)
        except AuthorizationError:
            return Return.err(unauthorized())

        try:
            membership_role = MembershipRole(role)
        except ValueError:
            return Return.err(
                Error(VALIDATION_ERROR, f"Invalid role: {role}. Must be one of: OWNER, MEMBER")
            )

        issued = issue_token()

        async with self.uow:
            invitation = Invitation(
                workspace_id=context.workspace_id,
                token_hash=issued.token_hash,
                role=membership_role,
                created_by_user_id=context.user_id,
                expires_at=utcnow() + timedelta(days=self.config.INVITE_EXPIRY_DAYS),
            )
            invitation = await self.uow.invitations.create(invitation)

            await self.uow.commit()

            logger.info(
                "Invitation %s issued for workspace %s by user %s",
                invitation.id,
                context.workspace_id,
                context.user_id,
            )

            return Return.ok(
                GenerateInviteResponse(
                    invitation_id=str(invitation.id),
                    invite_link=build_invite_link(self.config.APP_URL, issued.raw),
                    role=membership_role.value,
                    expires_at=invitation.expires_at,
                )
            )
