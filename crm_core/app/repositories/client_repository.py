from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from crm_core.domain.entities import Client, ClientStatus


class IClientRepository(ABC):
    """Client repository interface - application layer"""

    @abstractmethod
    async def get_in_workspace(self, client_id: UUID, workspace_id: UUID) -> Optional[Client]:
        """Get a client by ID, only if it belongs to the workspace"""
        pass

    @abstractmethod
    async def search(
        self,
        workspace_id: UUID,
        search: Optional[str] = None,
        status: Optional[ClientStatus] = None,
    ) -> List[Client]:
        """Clients of a workspace matching name, email or phone, most recently updated first"""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client"""
        pass

    @abstractmethod
    async def update(self, client: Client) -> Client:
        """Update existing client"""
        pass

    @abstractmethod
    async def delete(self, client: Client) -> None:
        """Delete a client with its activities and follow-ups"""
        pass
