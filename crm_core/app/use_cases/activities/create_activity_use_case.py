"""
Create Activity Use Case
"""

import logging
from uuid import UUID

from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.clients.checks import client_not_found
from crm_core.app.use_cases.errors import VALIDATION_ERROR, server_error_boundary
from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.base import to_naive_utc, utcnow
from crm_core.domain.entities import Activity, ActivityType
from crm_core.libs.result import Error, Result, Return

from .dtos import ActivityInfo, CreateActivityCommand

logger = logging.getLogger(__name__)

CONTENT_MAX_LENGTH = 10000


class CreateActivityUseCase:
    """
    Use case for logging an activity on a client.

    Business Rules:
    - Any member can log activities
    - The client must belong to the current workspace (NOT_FOUND otherwise)
    - occurred_at defaults to now
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @server_error_boundary("Activity creation")
    async def execute(
        self, context: WorkspaceContext, client_id: UUID, command: CreateActivityCommand
    ) -> Result[ActivityInfo]:
        try:
            activity_type = ActivityType(command.type.upper())
        except ValueError:
            return Return.err(
                Error(VALIDATION_ERROR, "Type must be one of NOTE, CALL, EMAIL, MEETING")
            )

        content = command.content.strip()
        if not content:
            return Return.err(Error(VALIDATION_ERROR, "Content is required"))
        if len(content) > CONTENT_MAX_LENGTH:
            return Return.err(
                Error(VALIDATION_ERROR, f"Content must be at most {CONTENT_MAX_LENGTH} characters")
            )

        occurred_at = to_naive_utc(command.occurred_at) if command.occurred_at else utcnow()

        async with self.uow:
            client = await self.uow.clients.get_in_workspace(client_id, context.workspace_id)
            if client is None:
                return Return.err(client_not_found())

            activity = await self.uow.activities.create(
                Activity(
                    workspace_id=context.workspace_id,
                    client_id=client.id,
                    type=activity_type,
                    content=content,
                    occurred_at=occurred_at,
                )
            )
            await self.uow.commit()

            logger.info("Activity %s logged on client %s", activity.id, client.id)
            return Return.ok(ActivityInfo.from_entity(activity))
