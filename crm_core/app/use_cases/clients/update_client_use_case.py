"""
Update Client Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.base import utcnow
from crm_core.libs.result import Result, Return

from .checks import check_fields, client_not_found
from .dtos import ClientInfo, UpdateClientCommand

logger = logging.getLogger(__name__)


class UpdateClientUseCase:
    """Partial update. Fields left out of the command keep their value."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Client update")
    async def execute(
        self, context: WorkspaceContext, client_id: UUID, command: UpdateClientCommand
    ) -> Result[ClientInfo]:
        checked = check_fields(command.model_dump(exclude_unset=True))
        if checked.is_err():
            return Return.err(checked.error)

        async with self.uow:
            client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
            if client is None:
                return Return.err(client_not_found())

            for field, value in checked.value.items():
                setattr(client, field, value)
            client.updated_at = utcnow()

            client = await self.uow.clients.update(client)
            await self.uow.commit()

            logger.info("Client %s updated by user %s", client.id, context.user_id)
            return Return.ok(ClientInfo.from_entity(client))
