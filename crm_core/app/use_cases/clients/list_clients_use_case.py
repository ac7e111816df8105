"""
List Clients Use Case
"""

from typing import Optional

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .checks import parse_status
from .dtos import ClientInfo, ClientListResponse


class ListClientsUseCase:
    """
    Clients of the current workspace, most recently updated first.

    `search` matches name, email or phone (case-insensitive substring).
    `status` filters on one status; "all" or None disables the filter.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Client listing")
    async def execute(
        self,
        context: WorkspaceContext,
        search: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Result[ClientListResponse]:
        status_filter = None
        if status and status.lower() != "all":
            parsed = parse_status(status)
            if parsed.is_err():
                return Return.err(parsed.error)
            status_filter = parsed.value

        search = (search or "").strip() or None

        async with self.uow:
            clients = await self.uow.clients.search(context.workspace_id, search, status_filter)

            return Return.ok(
                ClientListResponse(clients=[ClientInfo.from_entity(client) for client in clients])
            )
