"""
List Follow-ups Use Case
"""

from typing import Optional
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.clients.checks import client_not_found
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .dtos import FollowUpInfo, FollowUpListResponse


class ListFollowUpsUseCase:
    """
    Follow-ups of the current workspace, earliest due first.

    Restricted to one client when `client_id` is given; that client must
    belong to the workspace.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Follow-up listing")
    async def execute(
        self, context: WorkspaceContext, client_id: Optional[UUID] = None
    ) -> Result[FollowUpListResponse]:
        async with self.uow:
            if client_id is not None:
                client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
                if client is None:
                    return Return.err(client_not_found())

            rows = await self.uow.follow_ups.list_with_clients(context.workspace_id, client_id)
            return Return.ok(
                FollowUpListResponse(
                    follow_ups=[
                        FollowUpInfo.from_entity(follow_up, client) for follow_up, client in rows
                    ]
                )
            )
