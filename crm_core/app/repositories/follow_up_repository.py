from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from crm_core.domain.entities import Client, FollowUp


class IFollowUpRepository(ABC):
    """Follow-up repository interface - application layer"""

    @abstractmethod
    async def get_in_workspace(self, follow_up_id: UUID, workspace_id: UUID) -> Optional[FollowUp]:
        """Get a follow-up by ID, only if it belongs to the workspace"""
        pass

    @abstractmethod
    async def list_with_clients(
        self, workspace_id: UUID, client_id: Optional[UUID] = None
    ) -> List[Tuple[FollowUp, Client]]:
        """Follow-ups of a workspace (optionally one client) with their client, earliest due first"""
        pass

    @abstractmethod
    async def create(self, follow_up: FollowUp) -> FollowUp:
        """Create a new follow-up"""
        pass

    @abstractmethod
    async def update(self, follow_up: FollowUp) -> FollowUp:
        """Update existing follow-up"""
        pass

    @abstractmethod
    async def delete(self, follow_up: FollowUp) -> None:
        """Delete a follow-up"""
        pass
