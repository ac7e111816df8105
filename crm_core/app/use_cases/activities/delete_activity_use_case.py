"""
Delete Activity Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import NOT_FOUND, server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Error, Result, Return

from .dtos import DeleteActivityResponse

logger = logging.getLogger(__name__)


class DeleteActivityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Activity deletion")
    async def execute(
        self, context: WorkspaceContext, activity_id: UUID
    ) -> Result[DeleteActivityResponse]:
        async with self.uow:
            activity = await self.uow.activities.get_in_workspace(
                activity_id, context.workspace_id
            )
            if activity is None:
                return Return.err(Error(NOT_FOUND, "Activity not found"))

            await self.uow.activities.delete(activity)
            await self.uow.commit()

            logger.info("Activity %s deleted by user %s", activity_id, context.user_id)
            return Return.ok(
                DeleteActivityResponse(status="deleted", activity_id=str(activity_id))
            )
