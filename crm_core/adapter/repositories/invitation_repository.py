from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.app.repositories.invitation_repository import IInvitationRepository
from crm_core.domain.entities import Invitation, Workspace


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token_hash(self, token_hash: str) -> Optional[Tuple[Invitation, Workspace]]:
        """Get invitation and its workspace by token hash"""
        stmt = (
            select(Invitation, Workspace)
            .join(Workspace, Invitation.workspace_id == Workspace.id)
            .where(Invitation.token_hash == token_hash)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_workspace_id(self, workspace_id: UUID) -> List[Invitation]:
        """Get all invitations for a workspace, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.workspace_id == workspace_id)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_accepted(self, invitation_id: UUID, user_id: UUID, now: datetime) -> bool:
        """Conditional UPDATE; the row count tells whether this call consumed the invitation"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.accepted_at.is_(None),
                Invitation.revoked_at.is_(None),
                Invitation.expires_at >= now,
            )
            .values(accepted_at=now, accepted_by_user_id=user_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def reload(self, invitation: Invitation) -> Invitation:
        """Re-read an invitation from the database"""
        await self.session.refresh(invitation)
        return invitation
