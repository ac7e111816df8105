"""
Update and Toggle Follow-up Use Cases
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.clients.checks import client_not_found
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.base import utcnow
from crm_core.libs.result import Result, Return

from .checks import check_fields, follow_up_not_found
from .dtos import FollowUpInfo, UpdateFollowUpCommand

logger = logging.getLogger(__name__)


class UpdateFollowUpUseCase:
    """Partial update of reason, due date or status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Follow-up update")
    async def execute(
        self, context: WorkspaceContext, follow_up_id: UUID, command: UpdateFollowUpCommand
    ) -> Result[FollowUpInfo]:
        checked = check_fields(**command.model_dump(exclude_none=True))
        if checked.is_err():
            return Return.err(checked.error)

        async with self.uow:
            follow_up = await self.uow.follow_ups.get_in_workspace(
                follow_up_id, context.workspace_id
            )
            if follow_up is None:
                return Return.err(follow_up_not_found())
            client = await self.uow.clients.get_in_workspace(
                follow_up.client_id, context.workspace_id
            )
            if client is None:
                return Return.err(client_not_found())

            for field, value in checked.value.items():
                setattr(follow_up, field, value)
            follow_up.updated_at = utcnow()

            follow_up = await self.uow.follow_ups.update(follow_up)
            await self.uow.commit()

            logger.info("Follow-up %s updated by user %s", follow_up.id, context.user_id)
            return Return.ok(FollowUpInfo.from_entity(follow_up, client))


class ToggleFollowUpUseCase:
    """Flip a follow-up between OPEN and DONE"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Follow-up toggle")
    async def execute(self, context: WorkspaceContext, follow_up_id: UUID) -> Result[FollowUpInfo]:
        async with self.uow:
            follow_up = await self.uow.follow_ups.get_in_workspace(
                follow_up_id, context.workspace_id
            )
            if follow_up is None:
                return Return.err(follow_up_not_found())
            client = await self.uow.clients.get_in_workspace(
                follow_up.client_id, context.workspace_id
            )
            if client is None:
                return Return.err(client_not_found())

            follow_up.status = follow_up.status.toggled()
            follow_up.updated_at = utcnow()

            follow_up = await self.uow.follow_ups.update(follow_up)
            await self.uow.commit()

            logger.info("Follow-up %s marked %s", follow_up.id, follow_up.status.value)
            return Return.ok(FollowUpInfo.from_entity(follow_up, client))
