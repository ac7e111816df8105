from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from crm_core.domain.entities import Workspace


class IWorkspaceRepository(ABC):
    """Workspace repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        pass

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        """Check whether a slug is already taken"""
        pass

    @abstractmethod
    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        pass
