"""
Delete Client Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .checks import client_not_found
from .dtos import DeleteClientResponse

logger = logging.getLogger(__name__)


class DeleteClientUseCase:
    """Deletes the client together with its activities and follow-ups"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Client deletion")
    async def execute(
        self, context: WorkspaceContext, client_id: UUID
    ) -> Result[DeleteClientResponse]:
        async with self.uow:
            client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
            if client is None:
                return Return.err(client_not_found())

            await self.uow.clients.delete(client)
            await self.uow.commit()

            logger.info("Client %s deleted by user %s", client_id, context.user_id)
            return Return.ok(DeleteClientResponse(status="deleted", client_id=str(client_id)))
