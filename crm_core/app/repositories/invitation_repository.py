from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from crm_core.domain.entities import Invitation, Workspace


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Tuple[Invitation, Workspace]]:
        """Get invitation and its workspace by token hash"""
        pass

    @abstractmethod
    async def get_by_workspace_id(self, workspace_id: UUID) -> List[Invitation]:
        """Get all invitations for a workspace, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def mark_accepted(self, invitation_id: UUID, user_id: UUID, now: datetime) -> bool:
        """
        Consume a pending invitation.

        Only an invitation that is neither accepted, revoked nor expired is
        updated. Returns False when another transaction got there first.
        """
        pass

    @abstractmethod
    async def reload(self, invitation: Invitation) -> Invitation:
        """Re-read an invitation from the database"""
        pass
