from abc import ABC, abstractmethod

from crm_core.app.repositories.activity_repository import IActivityRepository
from crm_core.app.repositories.client_repository import IClientRepository
from crm_core.app.repositories.follow_up_repository import IFollowUpRepository
from crm_core.app.repositories.invitation_repository import IInvitationRepository
from crm_core.app.repositories.membership_repository import IMembershipRepository
from crm_core.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from crm_core.app.repositories.user_repository import IUserRepository
from crm_core.app.repositories.workspace_repository import IWorkspaceRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    workspaces: IWorkspaceRepository
    memberships: IMembershipRepository
    invitations: IInvitationRepository
    password_reset_tokens: IPasswordResetTokenRepository
    clients: IClientRepository
    activities: IActivityRepository
    follow_ups: IFollowUpRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
