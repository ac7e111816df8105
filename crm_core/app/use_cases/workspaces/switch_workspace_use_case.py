"""
Switch Workspace Use Case

Handles switching the user's current workspace.
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary, unauthorized
from crm_core.libs.result import Result, Return

from .dtos import WorkspaceInfo

logger = logging.getLogger(__name__)


class SwitchWorkspaceUseCase:
    """
    Use case for switching the current workspace.

    Business Rules:
    - User must be a member of the target workspace
    - Unknown workspace and missing membership fail alike (UNAUTHORIZED)
    - Persists user.selected_workspace_id; the API layer re-issues the
      signed preference cookie
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Workspace switch")
    async def execute(self, user_id: UUID, workspace_id: UUID) -> Result[WorkspaceInfo]:
        """
        Execute switch workspace use case.

        Args:
            user_id: Current authenticated user ID
            workspace_id: Target workspace ID

        Returns:
            Result with the selected workspace, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(unauthorized())

            found = await self.uow.memberships.get_with_workspace(user_id, workspace_id)
            if found is None:
                logger.warning("User %s tried to switch to foreign workspace %s", user_id, workspace_id)
                return Return.err(unauthorized())

            membership, workspace = found

            user.selected_workspace_id = workspace.id
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                WorkspaceInfo(
                    id=str(workspace.id),
                    name=workspace.name,
                    slug=workspace.slug,
                    role=membership.role.value,
                )
            )
