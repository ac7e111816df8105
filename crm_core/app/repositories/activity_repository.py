from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from crm_core.domain.entities import Activity


class IActivityRepository(ABC):
    """Activity repository interface - application layer"""

    @abstractmethod
    async def get_in_workspace(self, activity_id: UUID, workspace_id: UUID) -> Optional[Activity]:
        """Get an activity by ID, only if it belongs to the workspace"""
        pass

    @abstractmethod
    async def list_for_client(self, client_id: UUID, workspace_id: UUID) -> List[Activity]:
        """Timeline of a client, most recent first"""
        pass

    @abstractmethod
    async def create(self, activity: Activity) -> Activity:
        """Create a new activity"""
        pass

    @abstractmethod
    async def delete(self, activity: Activity) -> None:
        """Delete an activity"""
        pass
