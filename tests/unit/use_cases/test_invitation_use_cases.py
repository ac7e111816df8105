from datetime import timedelta
from urllib.parse import parse_qs, urlparse
from uuid import uuid4

import pytest

from crm_core.app.services.token_issuer import hash_token
from crm_core.app.use_cases.invitations import (
    AcceptInviteUseCase,
    GenerateInviteUseCase,
    ListInvitesUseCase,
    RevokeInviteUseCase,
    ValidateInviteUseCase,
)
from crm_core.domain.base import utcnow
from crm_core.domain.entities import Invitation, Membership, MembershipRole, User, Workspace

RAW = "a" * 64


class InviteConfig:
    APP_URL = "https://crm.example.com"
    INVITE_EXPIRY_DAYS = 7


@pytest.fixture
def workspace():
    return Workspace(id=uuid4(), name="Acme Corp", slug="acme-corp")


def invitation(workspace, **kwargs):
    values = dict(
        id=uuid4(),
        workspace_id=workspace.id,
        token_hash=hash_token(RAW),
        role=MembershipRole.member,
        created_by_user_id=uuid4(),
        expires_at=utcnow() + timedelta(days=7),
    )
    values.update(kwargs)
    return Invitation(**values)


# ---------------------------------------------------------------- generate


@pytest.mark.asyncio
async def test_generate_invite(mock_uow, owner_context):
    result = await GenerateInviteUseCase(mock_uow, config=InviteConfig).execute(owner_context)

    assert result.is_ok()
    stored = mock_uow.invitations.create.call_args.args[0]
    assert stored.role == MembershipRole.member
    assert stored.workspace_id == owner_context.workspace_id
    assert stored.created_by_user_id == owner_context.user_id

    link = urlparse(result.value.invite_link)
    assert link.netloc == "crm.example.com"
    assert link.path == "/accept-invite"
    raw = parse_qs(link.query)["token"][0]
    assert stored.token_hash == hash_token(raw)
    assert raw not in stored.token_hash

    lifetime = stored.expires_at - utcnow()
    assert timedelta(days=6, hours=23) < lifetime <= timedelta(days=7)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_generate_owner_invite(mock_uow, owner_context):
    result = await GenerateInviteUseCase(mock_uow, config=InviteConfig).execute(owner_context, "OWNER")

    assert result.value.role == "OWNER"


@pytest.mark.asyncio
async def test_generate_rejects_unknown_role(mock_uow, owner_context):
    result = await GenerateInviteUseCase(mock_uow, config=InviteConfig).execute(owner_context, "ADMIN")

    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.invitations.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_member_cannot_generate(mock_uow, member_context):
    result = await GenerateInviteUseCase(mock_uow, config=InviteConfig).execute(member_context)

    assert result.error.code == "UNAUTHORIZED"


# ---------------------------------------------------------------- validate


@pytest.mark.asyncio
async def test_validate_pending_invitation(mock_uow, workspace):
    mock_uow.invitations.get_by_token_hash.return_value = (invitation(workspace), workspace)

    result = await ValidateInviteUseCase(mock_uow).execute(RAW)

    assert result.value.workspace_name == "Acme Corp"
    assert result.value.role == "MEMBER"
    mock_uow.invitations.get_by_token_hash.assert_awaited_once_with(hash_token(RAW))
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields, code",
    [
        ({"revoked_at": utcnow()}, "REVOKED"),
        ({"accepted_at": utcnow(), "accepted_by_user_id": uuid4()}, "USED"),
        ({"expires_at": utcnow() - timedelta(seconds=1)}, "EXPIRED"),
        # Revocation is reported even once the invitation is also expired
        ({"revoked_at": utcnow() - timedelta(days=8), "expires_at": utcnow() - timedelta(days=1)}, "REVOKED"),
    ],
)
async def test_validate_outcomes(mock_uow, workspace, fields, code):
    mock_uow.invitations.get_by_token_hash.return_value = (invitation(workspace, **fields), workspace)

    result = await ValidateInviteUseCase(mock_uow).execute(RAW)

    assert result.error.code == code


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["", "unknown"])
async def test_validate_invalid_token(mock_uow, token):
    mock_uow.invitations.get_by_token_hash.return_value = None

    result = await ValidateInviteUseCase(mock_uow).execute(token)

    assert result.error.code == "INVALID"


# ---------------------------------------------------------------- accept


@pytest.mark.asyncio
async def test_accept_creates_membership(mock_uow, workspace):
    user = User(id=uuid4(), email="new@example.com")
    inv = invitation(workspace)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_user_and_workspace.return_value = None

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.is_ok()
    assert result.value.already_member is False
    assert result.value.role == "MEMBER"

    created = mock_uow.memberships.add_if_absent.call_args.args[0]
    assert created.user_id == user.id
    assert created.workspace_id == workspace.id
    invitation_id, accepted_by, _ = mock_uow.invitations.mark_accepted.call_args.args
    assert (invitation_id, accepted_by) == (inv.id, user.id)
    assert user.selected_workspace_id == workspace.id
    mock_uow.invitations.get_by_token_hash.assert_awaited_once_with(hash_token(RAW))
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_accept_by_existing_member_consumes_invitation(mock_uow, workspace):
    user = User(id=uuid4(), email="member@example.com")
    inv = invitation(workspace, role=MembershipRole.owner)
    existing = Membership(id=uuid4(), user_id=user.id, workspace_id=workspace.id, role=MembershipRole.member)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_user_and_workspace.return_value = existing

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.value.already_member is True
    # Existing role is kept
    assert result.value.role == "MEMBER"
    mock_uow.memberships.add_if_absent.assert_not_awaited()
    mock_uow.invitations.mark_accepted.assert_awaited_once()
    assert user.selected_workspace_id == workspace.id


@pytest.mark.asyncio
async def test_membership_created_concurrently_counts_as_already_member(mock_uow, workspace):
    user = User(id=uuid4(), email="new@example.com")
    inv = invitation(workspace)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_user_and_workspace.return_value = None
    stored = Membership(id=uuid4(), user_id=user.id, workspace_id=workspace.id, role=MembershipRole.owner)
    mock_uow.memberships.add_if_absent.side_effect = lambda entity: (stored, False)

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.value.already_member is True
    assert result.value.role == "OWNER"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_losing_a_concurrent_accept_to_the_same_user_is_idempotent(mock_uow, workspace):
    user = User(id=uuid4(), email="member@example.com")
    inv = invitation(workspace)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.invitations.mark_accepted.return_value = False

    def winner_state(entity):
        entity.accepted_at = utcnow()
        entity.accepted_by_user_id = user.id
        return entity

    mock_uow.invitations.reload.side_effect = winner_state
    mock_uow.memberships.get_by_user_and_workspace.return_value = Membership(
        id=uuid4(), user_id=user.id, workspace_id=workspace.id, role=MembershipRole.member
    )

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.is_ok()
    assert result.value.already_member is True
    mock_uow.memberships.add_if_absent.assert_not_awaited()


@pytest.mark.asyncio
async def test_losing_a_concurrent_accept_to_another_user_is_used(mock_uow, workspace):
    user = User(id=uuid4(), email="late@example.com")
    inv = invitation(workspace)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.invitations.mark_accepted.return_value = False

    def winner_state(entity):
        entity.accepted_at = utcnow()
        entity.accepted_by_user_id = uuid4()
        return entity

    mock_uow.invitations.reload.side_effect = winner_state

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.error.code == "USED"
    mock_uow.memberships.add_if_absent.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_repeat_accept_by_same_user_is_idempotent(mock_uow, workspace):
    user = User(id=uuid4(), email="member@example.com")
    accepted_at = utcnow() - timedelta(minutes=1)
    inv = invitation(workspace, accepted_at=accepted_at, accepted_by_user_id=user.id)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_user_and_workspace.return_value = Membership(
        id=uuid4(), user_id=user.id, workspace_id=workspace.id, role=MembershipRole.member
    )

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.value.already_member is True
    assert inv.accepted_at == accepted_at
    mock_uow.invitations.mark_accepted.assert_not_awaited()


@pytest.mark.asyncio
async def test_accepted_invitation_is_used_for_other_users(mock_uow, workspace):
    inv = invitation(workspace, accepted_at=utcnow(), accepted_by_user_id=uuid4())
    other = User(id=uuid4(), email="other@example.com")
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = other

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, other.id)

    assert result.error.code == "USED"
    mock_uow.memberships.add_if_absent.assert_not_awaited()


@pytest.mark.asyncio
async def test_consumed_link_does_not_restore_removed_membership(mock_uow, workspace):
    user = User(id=uuid4(), email="removed@example.com")
    inv = invitation(workspace, accepted_at=utcnow(), accepted_by_user_id=user.id)
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_user_and_workspace.return_value = None

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, user.id)

    assert result.error.code == "USED"
    mock_uow.memberships.add_if_absent.assert_not_awaited()


@pytest.mark.asyncio
async def test_accept_expired_invitation(mock_uow, workspace):
    inv = invitation(workspace, expires_at=utcnow() - timedelta(days=1))
    mock_uow.invitations.get_by_token_hash.return_value = (inv, workspace)
    mock_uow.users.get_by_id.return_value = User(id=uuid4(), email="late@example.com")

    result = await AcceptInviteUseCase(mock_uow).execute(RAW, uuid4())

    assert result.error.code == "EXPIRED"
    mock_uow.invitations.mark_accepted.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_accept_unknown_token(mock_uow):
    mock_uow.invitations.get_by_token_hash.return_value = None

    result = await AcceptInviteUseCase(mock_uow).execute("nope", uuid4())

    assert result.error.code == "INVALID"


# ---------------------------------------------------------------- revoke


@pytest.mark.asyncio
async def test_revoke_invitation(mock_uow, owner_context):
    ws = Workspace(id=owner_context.workspace_id, name="Acme Corp", slug="acme-corp")
    inv = invitation(ws)
    mock_uow.invitations.get_by_id.return_value = inv

    result = await RevokeInviteUseCase(mock_uow).execute(owner_context, inv.id)

    assert result.value.status == "revoked"
    assert inv.revoked_at is not None
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_revoke_twice_keeps_first_timestamp(mock_uow, owner_context):
    ws = Workspace(id=owner_context.workspace_id, name="Acme Corp", slug="acme-corp")
    revoked_at = utcnow() - timedelta(hours=1)
    inv = invitation(ws, revoked_at=revoked_at)
    mock_uow.invitations.get_by_id.return_value = inv

    result = await RevokeInviteUseCase(mock_uow).execute(owner_context, inv.id)

    assert result.is_ok()
    assert inv.revoked_at == revoked_at
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_revoke_accepted_invitation(mock_uow, owner_context):
    ws = Workspace(id=owner_context.workspace_id, name="Acme Corp", slug="acme-corp")
    inv = invitation(ws, accepted_at=utcnow(), accepted_by_user_id=uuid4())
    mock_uow.invitations.get_by_id.return_value = inv

    result = await RevokeInviteUseCase(mock_uow).execute(owner_context, inv.id)

    assert result.error.code == "USED"


@pytest.mark.asyncio
async def test_revoke_foreign_invitation_is_not_found(mock_uow, owner_context, workspace):
    mock_uow.invitations.get_by_id.return_value = invitation(workspace)

    result = await RevokeInviteUseCase(mock_uow).execute(owner_context, uuid4())

    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_member_cannot_revoke(mock_uow, member_context):
    result = await RevokeInviteUseCase(mock_uow).execute(member_context, uuid4())

    assert result.error.code == "UNAUTHORIZED"


# ---------------------------------------------------------------- list


@pytest.mark.asyncio
async def test_list_invites_with_derived_status(mock_uow, owner_context):
    ws = Workspace(id=owner_context.workspace_id, name="Acme Corp", slug="acme-corp")
    mock_uow.invitations.get_by_workspace_id.return_value = [
        invitation(ws),
        invitation(ws, expires_at=utcnow() - timedelta(days=1)),
        invitation(ws, revoked_at=utcnow()),
    ]

    result = await ListInvitesUseCase(mock_uow).execute(owner_context)

    statuses = [item.status for item in result.value.invitations]
    assert statuses == ["pending", "expired", "revoked"]
    assert "token" not in result.value.invitations[0].model_dump()


@pytest.mark.asyncio
async def test_member_cannot_list_invites(mock_uow, member_context):
    result = await ListInvitesUseCase(mock_uow).execute(member_context)

    assert result.error.code == "UNAUTHORIZED"
