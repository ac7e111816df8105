from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.app.repositories.workspace_repository import IWorkspaceRepository
from crm_core.domain.entities import Workspace


class WorkspaceRepository(IWorkspaceRepository):
    """Workspace repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        stmt = select(Workspace).where(Workspace.id == workspace_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def slug_exists(self, slug: str) -> bool:
        """Check whether a slug is already taken"""
        stmt = select(Workspace.id).where(Workspace.slug == slug)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace
