"""
Create Client Use Case
"""

import logging

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.entities import Client
from crm_core.libs.result import Result, Return

from .checks import check_fields
from .dtos import ClientInfo, CreateClientCommand

logger = logging.getLogger(__name__)


class CreateClientUseCase:
    """
    Use case for adding a client to the current workspace.

    Business Rules:
    - Any member can create clients
    - Status defaults to PROSPECT
    - The client is always created in the caller's current workspace
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Client creation")
    async def execute(
        self, context: WorkspaceContext, command: CreateClientCommand
    ) -> Result[ClientInfo]:
        checked = check_fields(command.model_dump())
        if checked.is_err():
            return Return.err(checked.error)

        async with self.uow:
            client = await self.uow.clients.create(
                Client(workspace_id=context.workspace_id, **checked.value)
            )
            await self.uow.commit()

            logger.info(
                "Client %s created in workspace %s by user %s",
                client.id,
                context.workspace_id,
                context.user_id,
            )
            return Return.ok(ClientInfo.from_entity(client))
