from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from crm_core.domain.entities import Membership, User, Workspace


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_user_and_workspace(
        self, user_id: UUID, workspace_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and workspace"""
        pass

    @abstractmethod
    async def get_with_workspace(
        self, user_id: UUID, workspace_id: UUID
    ) -> Optional[Tuple[Membership, Workspace]]:
        """Get membership and its workspace for a user/workspace pair"""
        pass

    @abstractmethod
    async def get_oldest_with_workspace(
        self, user_id: UUID
    ) -> Optional[Tuple[Membership, Workspace]]:
        """Get the earliest created membership of a user, with its workspace"""
        pass

    @abstractmethod
    async def list_with_workspaces(
        self, user_id: UUID
    ) -> List[Tuple[Membership, Workspace]]:
        """Get all memberships of a user with their workspaces, ordered by workspace name"""
        pass

    @abstractmethod
    async def list_with_users(
        self, workspace_id: UUID
    ) -> List[Tuple[Membership, User]]:
        """Get all memberships of a workspace with their users, oldest first"""
        pass

    @abstractmethod
    async def lock_owners(self, workspace_id: UUID) -> List[Membership]:
        """
        Get the OWNER memberships of a workspace, locking them until the
        transaction ends.
        """
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def add_if_absent(self, membership: Membership) -> Tuple[Membership, bool]:
        """
        Create a membership unless the user already belongs to the workspace.

        Returns the stored membership and whether this call created it.
        """
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        pass
