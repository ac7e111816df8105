"""
List Activities Use Case
"""

from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.clients.checks import client_not_found
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .dtos import ActivityInfo, ActivityListResponse


class ListActivitiesUseCase:
    """Timeline of one client of the current workspace"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Activity listing")
    async def execute(
        self, context: WorkspaceContext, client_id: UUID
    ) -> Result[ActivityListResponse]:
        async with self.uow:
            client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
            if client is None:
                return Return.err(client_not_found())

            activities = await self.uow.activities.list_for_client(
                client.id, context.workspace_id
            )
            return Return.ok(
                ActivityListResponse(
                    activities=[ActivityInfo.from_entity(activity) for activity in activities]
                )
            )
