from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.app.repositories.activity_repository import IActivityRepository
from crm_core.domain.entities import Activity


class ActivityRepository(IActivityRepository):
    """Activity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_in_workspace(self, activity_id: UUID, workspace_id: UUID) -> Optional[Activity]:
        stmt = select(Activity).where(
            Activity.id == activity_id, Activity.workspace_id == workspace_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_client(self, client_id: UUID, workspace_id: UUID) -> List[Activity]:
        stmt = (
            select(Activity)
            .where(Activity.client_id == client_id, Activity.workspace_id == workspace_id)
            .order_by(Activity.occurred_at.desc(), Activity.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, activity: Activity) -> Activity:
        self.session.add(activity)
        await self.session.flush()
        await self.session.refresh(activity)
        return activity

    async def delete(self, activity: Activity) -> None:
        await self.session.delete(activity)
        await self.session.flush()
