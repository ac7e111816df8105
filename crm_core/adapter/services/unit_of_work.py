from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.adapter.repositories.activity_repository import ActivityRepository
from crm_core.adapter.repositories.client_repository import ClientRepository
from crm_core.adapter.repositories.follow_up_repository import FollowUpRepository
from crm_core.adapter.repositories.invitation_repository import InvitationRepository
from crm_core.adapter.repositories.membership_repository import MembershipRepository
from crm_core.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from crm_core.adapter.repositories.user_repository import UserRepository
from crm_core.adapter.repositories.workspace_repository import WorkspaceRepository
from crm_core.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.workspaces = WorkspaceRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.clients = ClientRepository(self.session)
        self.activities = ActivityRepository(self.session)
        self.follow_ups = FollowUpRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
