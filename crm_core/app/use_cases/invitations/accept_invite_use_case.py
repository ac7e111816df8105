"""
Accept Invite Use Case

Handles redeeming an invitation by an authenticated user.
"""

import logging
from uuid import UUID

from crm_core.app.services.token_issuer import hash_token
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary, unauthorized
from crm_core.domain.base import utcnow
from crm_core.domain.entities import Invitation, Membership
from crm_core.libs.result import Result, Return

from .checks import invalid_invitation, invitation_error
from .dtos import AcceptInviteResponse

logger = logging.getLogger(__name__)


def _redeemed_by(invitation: Invitation, user_id: UUID) -> bool:
    return (
        invitation.revoked_at is None
        and invitation.accepted_at is not None
        and invitation.accepted_by_user_id == user_id
    )


class AcceptInviteUseCase:
    """
    Use case for accepting a workspace invitation.

    Business Rules:
    - Same checks as validation, run in one transaction
    - The invitation is consumed with a conditional update, so of two
      concurrent redemptions exactly one wins
    - Existing member: invitation is consumed, membership untouched,
      already_member=True
    - Otherwise a membership with the invitation's role is created
    - A repeat submission by the user who already redeemed the invitation
      succeeds with already_member=True; anyone else gets USED
    - The workspace becomes the user's selected workspace in every branch
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Invitation acceptance")
    async def execute(self, token: str, user_id: UUID) -> Result[AcceptInviteResponse]:
        """
        Execute accept invite use case.

        Args:
            token: Raw invitation token from the link
            user_id: Authenticated user redeeming the invitation

        Returns:
            Result with AcceptInviteResponse, or
            Error(INVALID | REVOKED | USED | EXPIRED | UNAUTHORIZED)
        """
        if not token:
            return Return.err(invalid_invitation())

        async with self.uow:
            found = await self.uow.invitations.get_by_token_hash(hash_token(token))
            if found is None:
                return Return.err(invalid_invitation())

            invitation, workspace = found
            now = utcnow()

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(unauthorized())

            redeemed_by_caller = _redeemed_by(invitation, user_id)

            if not redeemed_by_caller:
                error = invitation_error(invitation, now)
                if error is not None:
                    return Return.err(error)

                if not await self.uow.invitations.mark_accepted(invitation.id, user_id, now):
                    # Lost the race: judge the invitation as the winner left it
                    invitation = await self.uow.invitations.reload(invitation)
                    redeemed_by_caller = _redeemed_by(invitation, user_id)
                    if not redeemed_by_caller:
                        return Return.err(invitation_error(invitation, now) or invalid_invitation())

            membership = await self.uow.memberships.get_by_user_and_workspace(user_id, workspace.id)
            already_member = membership is not None

            # A consumed link never re-creates a membership removed since
            if redeemed_by_caller and not already_member:
                return Return.err(invitation_error(invitation, now))

            if membership is None:
                membership, created = await self.uow.memberships.add_if_absent(
                    Membership(
                        user_id=user_id,
                        workspace_id=workspace.id,
                        role=invitation.role,
                    )
                )
                already_member = not created

            user.selected_workspace_id = workspace.id
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(
                "Invitation %s accepted by user %s (already_member=%s)",
                invitation.id,
                user_id,
                already_member,
            )

            return Return.ok(
                AcceptInviteResponse(
                    workspace_id=str(workspace.id),
                    workspace_name=workspace.name,
                    role=membership.role.value,
                    already_member=already_member,
                )
            )
