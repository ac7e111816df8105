from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from crm_core.domain.authorization import WorkspaceContext
from crm_core.domain.entities import MembershipRole


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = AsyncMock()
    uow.workspaces = AsyncMock()
    uow.memberships = AsyncMock()
    uow.invitations = AsyncMock()
    uow.password_reset_tokens = AsyncMock()
    uow.clients = AsyncMock()
    uow.activities = AsyncMock()
    uow.follow_ups = AsyncMock()

    # Repositories return what they are given
    for repo in (
        uow.users,
        uow.workspaces,
        uow.memberships,
        uow.invitations,
        uow.password_reset_tokens,
        uow.clients,
        uow.activities,
        uow.follow_ups,
    ):
        repo.create.side_effect = lambda entity: entity
    for repo in (uow.users, uow.invitations, uow.clients, uow.follow_ups):
        repo.update.side_effect = lambda entity: entity

    # Conditional updates win unless a test says otherwise
    uow.invitations.mark_accepted.return_value = True
    uow.invitations.reload.side_effect = lambda entity: entity
    uow.password_reset_tokens.mark_used.return_value = True
    uow.memberships.add_if_absent.side_effect = lambda entity: (entity, True)

    return uow


@pytest.fixture
def password_hasher():
    """Hasher double: hash is 'hashed:<password>', verify compares accordingly"""
    hasher = MagicMock()
    hasher.hash.side_effect = lambda password: f"hashed:{password}"
    hasher.verify.side_effect = lambda password, password_hash: password_hash == f"hashed:{password}"
    return hasher


def make_context(role: MembershipRole) -> WorkspaceContext:
    return WorkspaceContext(
        workspace_id=uuid4(),
        workspace_name="Acme Corp",
        workspace_slug="acme-corp",
        user_id=uuid4(),
        role=role,
    )


@pytest.fixture
def owner_context():
    return make_context(MembershipRole.owner)


@pytest.fixture
def member_context():
    return make_context(MembershipRole.member)
