from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.app.repositories.client_repository import IClientRepository
from crm_core.domain.entities import Activity, Client, ClientStatus, FollowUp


class ClientRepository(IClientRepository):
    """Client repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_in_workspace(self, client_id: UUID, workspace_id: UUID) -> Optional[Client]:
        """Get a client by ID, only if it belongs to the workspace"""
        stmt = select(Client).where(Client.id == client_id, Client.workspace_id == workspace_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def search(
        self,
        workspace_id: UUID,
        search: Optional[str] = None,
        status: Optional[ClientStatus] = None,
    ) -> List[Client]:
        """Clients of a workspace matching name, email or phone, most recently updated first"""
        stmt = select(Client).where(Client.workspace_id == workspace_id)
        if search:
            stmt = stmt.where(
                or_(
                    Client.name.icontains(search, autoescape=True),
                    Client.email.icontains(search, autoescape=True),
                    Client.phone.icontains(search, autoescape=True),
                )
            )
        if status is not None:
            stmt = stmt.where(Client.status == status)

        result = await self.session.exec(stmt.order_by(Client.updated_at.desc(), Client.id))
        return list(result.all())

    async def create(self, client: Client) -> Client:
        """Create a new client"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def update(self, client: Client) -> Client:
        """Update existing client"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def delete(self, client: Client) -> None:
        """Delete a client with its activities and follow-ups"""
        await self.session.execute(delete(Activity).where(Activity.client_id == client.id))
        await self.session.execute(delete(FollowUp).where(FollowUp.client_id == client.id))
        await self.session.delete(client)
        await self.session.flush()
