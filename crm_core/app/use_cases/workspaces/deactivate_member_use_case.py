"""
Deactivate Member Use Case

Handles removing a member from the current workspace.
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import NOT_FOUND, server_error_boundary, unauthorized
from crm_core.domain.authorization import (
    AuthorizationError,
    WorkspaceContext,
    check_deactivation_invariants,
    require_role,
)
from crm_core.domain.entities import MembershipRole
from crm_core.libs.result import Error, Result, Return

from .dtos import DeactivateMemberResponse

logger = logging.getLogger(__name__)


class DeactivateMemberUseCase:
    """
    Use case for deactivating a member of the current workspace.

    Business Rules:
    - Only owners can deactivate members
    - Target membership is looked up inside the current workspace only
    - Nobody can deactivate their own membership (SELF_DEACTIVATION)
    - A workspace always keeps at least one owner (LAST_OWNER_VIOLATION).
      The owner rows are locked before counting, and the acting user must
      still be one of them, so concurrent removals are serialized
    - Deactivation deletes the membership row
    - If the removed user had this workspace selected, the selection moves
      to their oldest remaining membership, or is cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Member deactivation")
    async def execute(
        self, context: WorkspaceContext, membership_id: UUID
    ) -> Result[DeactivateMemberResponse]:
        """
        Execute deactivate member use case.

        Args:
            context: Workspace context of the acting user
            membership_id: Membership to remove

        Returns:
            Result with DeactivateMemberResponse, or Error
            (UNAUTHORIZED, NOT_FOUND, SELF_DEACTIVATION, LAST_OWNER_VIOLATION)
        """
        try:
            require_role(context, MembershipRole.owner)
        except AuthorizationError:
            return Return.err(unauthorized())

        async with self.uow:
            owners = await self.uow.memberships.lock_owners(context.workspace_id)
            if context.user_id not in {owner.user_id for owner in owners}:
                # Removed or demoted since the context was resolved
                return Return.err(unauthorized())

            target = await self.uow.memberships.get_by_id(membership_id)
            if target is None or target.workspace_id != context.workspace_id:
                return Return.err(Error(NOT_FOUND, "Member not found"))

            check = check_deactivation_invariants(target, context.user_id, len(owners))
            if check.is_err():
                return Return.err(check.error)

            removed_user_id = target.user_id
            await self.uow.memberships.delete(target)

            removed_user = await self.uow.users.get_by_id(removed_user_id)
            if removed_user is not None and removed_user.selected_workspace_id == context.workspace_id:
                remaining = await self.uow.memberships.get_oldest_with_workspace(removed_user_id)
                removed_user.selected_workspace_id = remaining[1].id if remaining else None
                await self.uow.users.update(removed_user)

            await self.uow.commit()

            logger.info(
                "Membership %s removed from workspace %s by user %s",
                membership_id,
                context.workspace_id,
                context.user_id,
            )

            return Return.ok(
                DeactivateMemberResponse(status="deactivated", membership_id=str(membership_id))
            )
