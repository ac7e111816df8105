"""
Get Client Use Case
"""

from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .checks import client_not_found
from .dtos import ClientInfo


class GetClientUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Client lookup")
    async def execute(self, context: WorkspaceContext, client_id: UUID) -> Result[ClientInfo]:
        async with self.uow:
            client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
            if client is None:
                return Return.err(client_not_found())

            return Return.ok(ClientInfo.from_entity(client))
