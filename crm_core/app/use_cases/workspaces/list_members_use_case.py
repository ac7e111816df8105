"""
List Members Use Case
"""

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Result, Return

from .dtos import MemberInfo, MemberListResponse


class ListMembersUseCase:
    """Members of the current workspace, oldest first. Open to every member."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Member listing")
    async def execute(self, context: WorkspaceContext) -> Result[MemberListResponse]:
        async with self.uow:
            rows = await self.uow.memberships.list_with_users(context.workspace_id)

            return Return.ok(
                MemberListResponse(
                    members=[
                        MemberInfo(
                            membership_id=str(membership.id),
                            user_id=str(user.id),
                            email=user.email,
                            name=user.name,
                            role=membership.role.value,
                            joined_at=membership.created_at,
                        )
                        for membership, user in rows
                    ]
                )
            )
