from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.app.repositories.follow_up_repository import IFollowUpRepository
from crm_core.domain.entities import Client, FollowUp


class FollowUpRepository(IFollowUpRepository):
    """Follow-up repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_in_workspace(self, follow_up_id: UUID, workspace_id: UUID) -> Optional[FollowUp]:
        """Get a follow-up by ID, only if it belongs to the workspace"""
        stmt = select(FollowUp).where(
            FollowUp.id == follow_up_id, FollowUp.workspace_id == workspace_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_with_clients(
        self, workspace_id: UUID, client_id: Optional[UUID] = None
    ) -> List[Tuple[FollowUp, Client]]:
        """Follow-ups of a workspace (optionally one client) with their client, earliest due first"""
        stmt = (
            select(FollowUp, Client)
            .join(Client, FollowUp.client_id == Client.id)
            .where(FollowUp.workspace_id == workspace_id)
        )
        if client_id is not None:
            stmt = stmt.where(FollowUp.client_id == client_id)

        result = await self.session.exec(stmt.order_by(FollowUp.due_date.asc(), FollowUp.id))
        return list(result.all())

    async def create(self, follow_up: FollowUp) -> FollowUp:
        """Create a new follow-up"""
        self.session.add(follow_up)
        await self.session.flush()
        await self.session.refresh(follow_up)
        return follow_up

    async def update(self, follow_up: FollowUp) -> FollowUp:
        """Update existing follow-up"""
        self.session.add(follow_up)
        await self.session.flush()
        await self.session.refresh(follow_up)
        return follow_up

    async def delete(self, follow_up: FollowUp) -> None:
        """Delete a follow-up"""
        await self.session.delete(follow_up)
        await self.session.flush()
