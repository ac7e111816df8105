"""
List Workspaces Use Case
"""

from typing import Optional
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.libs.result import Result, Return

from .dtos import WorkspaceListResponse, WorkspaceSummary


class ListWorkspacesUseCase:
    """Every workspace the user belongs to, ordered by name, with the user's role"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Workspace listing")
    async def execute(
        self, user_id: UUID, current_workspace_id: Optional[UUID] = None
    ) -> Result[WorkspaceListResponse]:
        async with self.uow:
            rows = await self.uow.memberships.list_with_workspaces(user_id)

            return Return.ok(
                WorkspaceListResponse(
                    workspaces=[
                        WorkspaceSummary(
                            id=str(workspace.id),
                            name=workspace.name,
                            slug=workspace.slug,
                            role=membership.role.value,
                            is_current=workspace.id == current_workspace_id,
                        )
                        for membership, workspace in rows
                    ]
                )
            )
