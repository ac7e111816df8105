from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.app.repositories.membership_repository import IMembershipRepository
from crm_core.domain.entities import Membership, MembershipRole, User, Workspace


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_and_workspace(
        self, user_id: UUID, workspace_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and workspace"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.workspace_id == workspace_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_workspace(
        self, user_id: UUID, workspace_id: UUID
    ) -> Optional[Tuple[Membership, Workspace]]:
        """Get membership and its workspace for a user/workspace pair"""
        stmt = (
            select(Membership, Workspace)
            .join(Workspace, Membership.workspace_id == Workspace.id)
            .where(Membership.user_id == user_id, Membership.workspace_id == workspace_id)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_oldest_with_workspace(
        self, user_id: UUID
    ) -> Optional[Tuple[Membership, Workspace]]:
        """Get the earliest created membership of a user, with its workspace"""
        stmt = (
            select(Membership, Workspace)
            .join(Workspace, Membership.workspace_id == Workspace.id)
            .where(Membership.user_id == user_id)
            # id breaks ties between rows created in the same instant
            .order_by(Membership.created_at.asc(), Membership.id.asc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_with_workspaces(
        self, user_id: UUID
    ) -> List[Tuple[Membership, Workspace]]:
        """Get all memberships of a user with their workspaces, ordered by workspace name"""
        stmt = (
            select(Membership, Workspace)
            .join(Workspace, Membership.workspace_id == Workspace.id)
            .where(Membership.user_id == user_id)
            .order_by(Workspace.name.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_with_users(
        self, workspace_id: UUID
    ) -> List[Tuple[Membership, User]]:
        """Get all memberships of a workspace with their users, oldest first"""
        stmt = (
            select(Membership, User)
            .join(User, Membership.user_id == User.id)
            .where(Membership.workspace_id == workspace_id)
            .order_by(Membership.created_at.asc(), Membership.id.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def lock_owners(self, workspace_id: UUID) -> List[Membership]:
        """Get the OWNER memberships of a workspace with FOR UPDATE"""
        stmt = (
            select(Membership)
            .where(
                Membership.workspace_id == workspace_id,
                Membership.role == MembershipRole.owner,
            )
            .order_by(Membership.id)
            .with_for_update()
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def add_if_absent(self, membership: Membership) -> Tuple[Membership, bool]:
        """Insert inside a SAVEPOINT; a unique violation means the membership exists"""
        try:
            async with self.session.begin_nested():
                self.session.add(membership)
        except IntegrityError:
            existing = await self.get_by_user_and_workspace(
                membership.user_id, membership.workspace_id
            )
            return existing, False

        await self.session.refresh(membership)
        return membership, True

    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
