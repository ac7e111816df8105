"""
Create Follow-up Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.clients.checks import client_not_found
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.entities import FollowUp
from crm_core.libs.result import Result, Return

from .checks import check_fields
from .dtos import CreateFollowUpCommand, FollowUpInfo

logger = logging.getLogger(__name__)


class CreateFollowUpUseCase:
    """
    Use case for scheduling a follow-up on a client.

    Business Rules:
    - Any member can schedule follow-ups
    - The client must belong to the current workspace (NOT_FOUND otherwise)
    - New follow-ups are OPEN
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Follow-up creation")
    async def execute(
        self, context: WorkspaceContext, client_id: UUID, command: CreateFollowUpCommand
    ) -> Result[FollowUpInfo]:
        checked = check_fields(reason=command.reason, due_date=command.due_date)
        if checked.is_err():
            return Return.err(checked.error)

        async with self.uow:
            client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
            if client is None:
                return Return.err(client_not_found())

            follow_up = await self.uow.follow_ups.create(
                FollowUp(workspace_id=context.workspace_id, client_id=client.id, **checked.value)
            )
            await self.uow.commit()

            logger.info("Follow-up %s scheduled on client %s", follow_up.id, client.id)
            return Return.ok(FollowUpInfo.from_entity(follow_up, client))
