"""
Delete Follow-up Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .checks import follow_up_not_found
from .dtos import DeleteFollowUpResponse

logger = logging.getLogger(__name__)


class DeleteFollowUpUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Follow-up deletion")
    async def execute(
        self, context: WorkspaceContext, follow_up_id: UUID
    ) -> Result[DeleteFollowUpResponse]:
        async with self.uow:
            follow_up = await self.uow.follow_ups.get_in_workspace(
                follow_up_id, context.workspace_id
            )
            if follow_up is None:
                return Return.err(follow_up_not_found())

            await self.uow.follow_ups.delete(follow_up)
            await self.uow.commit()

            logger.info("Follow-up %s deleted by user %s", follow_up_id, context.user_id)
            return Return.ok(
                DeleteFollowUpResponse(status="deleted", follow_up_id=str(follow_up_id))
            )
