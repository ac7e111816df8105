"""
Races between requests, each running on its own session and connection.
"""

import asyncio
from uuid import UUID

import pytest
from sqlmodel import select

from crm_core.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from crm_core.adapter.services.memory_rate_limiter import InMemoryRateLimiter
from crm_core.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from crm_core.app.use_cases.auth import (
    ConfirmPasswordResetUseCase,
    LoginUseCase,
    RegisterUserCommand,
    RegisterUserUseCase,
    RequestPasswordResetUseCase,
    SignupCommand,
    SignupUseCase,
)
from crm_core.app.use_cases.errors import TOKEN_INVALID, UNAUTHORIZED, USED
from crm_core.app.use_cases.invitations import AcceptInviteUseCase, GenerateInviteUseCase
from crm_core.app.use_cases.workspaces import (
    DeactivateMemberUseCase,
    ListMembersUseCase,
    ResolveWorkspaceUseCase,
)
from crm_core.domain.entities import Membership, MembershipRole
from tests.utils.api_helpers import PASSWORD, CapturingEmailSender, token_from_link

hasher = BcryptPasswordHasher(rounds=4)


@pytest.fixture
def run(session_factory):
    """Execute a use case on a fresh session, as a separate request would"""

    async def _run(build, *args):
        async with session_factory() as session:
            return await build(SqlAlchemyUnitOfWork(session)).execute(*args)

    return _run


async def signup_owner(run, email="owner@acme.com"):
    result = await run(
        lambda uow: SignupUseCase(uow, hasher),
        SignupCommand(email=email, password=PASSWORD, workspace_name="Acme"),
    )
    return UUID(result.value.user.id)


async def register_user(run, email):
    result = await run(
        lambda uow: RegisterUserUseCase(uow, hasher),
        RegisterUserCommand(email=email, password=PASSWORD),
    )
    return UUID(result.value.user.id)


async def context_of(run, user_id):
    return (await run(ResolveWorkspaceUseCase, user_id)).value


async def invite_token(run, context, role="MEMBER"):
    result = await run(GenerateInviteUseCase, context, role)
    return token_from_link(result.value.invite_link)


@pytest.mark.asyncio
async def test_double_accept_by_same_user(run, session_factory):
    owner_id = await signup_owner(run)
    token = await invite_token(run, await context_of(run, owner_id))
    invitee_id = await register_user(run, "jane@example.com")

    results = await asyncio.gather(
        run(AcceptInviteUseCase, token, invitee_id),
        run(AcceptInviteUseCase, token, invitee_id),
    )

    assert all(result.is_ok() for result in results), results
    assert sorted(result.value.already_member for result in results) == [False, True]

    async with session_factory() as session:
        memberships = (
            await session.exec(select(Membership).where(Membership.user_id == invitee_id))
        ).all()
    assert len(memberships) == 1


@pytest.mark.asyncio
async def test_double_accept_by_different_users(run):
    owner_id = await signup_owner(run)
    token = await invite_token(run, await context_of(run, owner_id))
    jane_id = await register_user(run, "jane@example.com")
    john_id = await register_user(run, "john@example.com")

    results = await asyncio.gather(
        run(AcceptInviteUseCase, token, jane_id),
        run(AcceptInviteUseCase, token, john_id),
    )

    assert sorted(result.is_ok() for result in results) == [False, True]
    loser = next(result for result in results if result.is_err())
    assert loser.error.code == USED


@pytest.mark.asyncio
async def test_reset_token_is_spent_once(run):
    await signup_owner(run)
    email_sender = CapturingEmailSender()
    await run(
        lambda uow: RequestPasswordResetUseCase(
            uow, email_sender, InMemoryRateLimiter(max_attempts=5, window_seconds=900)
        ),
        "owner@acme.com",
    )
    token = email_sender.last_token()

    results = await asyncio.gather(
        run(lambda uow: ConfirmPasswordResetUseCase(uow, hasher), token, "FirstChoice123"),
        run(lambda uow: ConfirmPasswordResetUseCase(uow, hasher), token, "SecondChoice123"),
    )

    assert sorted(result.is_ok() for result in results) == [False, True]
    loser = next(result for result in results if result.is_err())
    assert loser.error.code == TOKEN_INVALID

    # Only the winner's password took effect
    winner = "FirstChoice123" if results[0].is_ok() else "SecondChoice123"
    other = "SecondChoice123" if winner == "FirstChoice123" else "FirstChoice123"
    assert (await run(lambda uow: LoginUseCase(uow, hasher), "owner@acme.com", winner)).is_ok()
    assert (await run(lambda uow: LoginUseCase(uow, hasher), "owner@acme.com", other)).is_err()


@pytest.mark.asyncio
async def test_co_owners_removing_each_other_keep_one_owner(run):
    alice_id = await signup_owner(run, "alice@acme.com")
    alice = await context_of(run, alice_id)
    bob_id = await register_user(run, "bob@acme.com")
    await run(AcceptInviteUseCase, await invite_token(run, alice, role="OWNER"), bob_id)
    bob = await context_of(run, bob_id)
    assert bob.workspace_id == alice.workspace_id
    assert bob.role == MembershipRole.owner

    members = {m.email: m for m in (await run(ListMembersUseCase, alice)).value.members}

    results = await asyncio.gather(
        run(DeactivateMemberUseCase, alice, UUID(members["bob@acme.com"].membership_id)),
        run(DeactivateMemberUseCase, bob, UUID(members["alice@acme.com"].membership_id)),
    )

    assert sorted(result.is_ok() for result in results) == [False, True]
    loser = next(result for result in results if result.is_err())
    assert loser.error.code == UNAUTHORIZED

    survivor = alice if results[0].is_ok() else bob
    remaining = (await run(ListMembersUseCase, survivor)).value.members
    assert [m.role for m in remaining] == ["OWNER"]
    assert remaining[0].user_id == str(survivor.user_id)
