"""
Resolve Workspace Use Case

Determines which workspace a request acts on.
"""

import logging
from typing import Optional
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

logger = logging.getLogger(__name__)


class ResolveWorkspaceUseCase:
    """
    Use case for resolving the current workspace of a user.

    Business Rules:
    - Preference order: explicit preference (signed cookie), then the
      stored selected_workspace_id, then the oldest membership
    - A preference is honoured only while the membership exists
    - A stale preference falls back silently, it never fails the request
    - No membership at all resolves to None (user needs onboarding)
    - Read only: nothing is written here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Workspace resolution")
    async def execute(
        self, user_id: UUID, preferred_workspace_id: Optional[UUID] = None
    ) -> Result[Optional[WorkspaceContext]]:
        async with self.uow:
            candidates = [preferred_workspace_id]
            user = await self.uow.users.get_by_id(user_id)
            if user is not None:
                candidates.append(user.selected_workspace_id)

            for workspace_id in candidates:
                if workspace_id is None:
                    continue
                found = await self.uow.memberships.get_with_workspace(user_id, workspace_id)
                if found is not None:
                    membership, workspace = found
                    return Return.ok(_context(user_id, membership, workspace))
                logger.debug("Ignoring stale workspace preference %s for user %s", workspace_id, user_id)

            oldest = await self.uow.memberships.get_oldest_with_workspace(user_id)
            if oldest is None:
                return Return.ok(None)

            membership, workspace = oldest
            return Return.ok(_context(user_id, membership, workspace))


def _context(user_id, membership, workspace) -> WorkspaceContext:
    return WorkspaceContext(
        workspace_id=workspace.id,
        workspace_name=workspace.name,
        workspace_slug=workspace.slug,
        user_id=user_id,
        role=membership.role,
    )
