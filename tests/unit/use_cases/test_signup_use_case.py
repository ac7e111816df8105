from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from crm_core.app.use_cases.auth import SignupCommand, SignupUseCase
from crm_core.domain.entities import MembershipRole, User


def command(**overrides):
    values = dict(
        email="  Owner@Acme.com ",
        password="SecurePass123!",
        workspace_name="Acme Corp",
        name="Olivia Owner",
    )
    values.update(overrides)
    return SignupCommand(**values)


@pytest.mark.asyncio
async def test_signup_creates_workspace_user_and_owner_membership(mock_uow, password_hasher):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.workspaces.slug_exists.return_value = False

    result = await SignupUseCase(mock_uow, password_hasher).execute(command())

    assert result.is_ok()
    response = result.value
    assert response.user.email == "owner@acme.com"
    assert response.workspace.name == "Acme Corp"
    assert response.workspace.slug == "acme-corp"

    mock_uow.users.get_by_email.assert_awaited_once_with("owner@acme.com")

    user = mock_uow.users.create.call_args.args[0]
    workspace = mock_uow.workspaces.create.call_args.args[0]
    membership = mock_uow.memberships.create.call_args.args[0]

    assert user.password_hash == "hashed:SecurePass123!"
    assert user.selected_workspace_id == workspace.id
    assert membership.role == MembershipRole.owner
    assert membership.user_id == user.id
    assert membership.workspace_id == workspace.id
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_signup_suffixes_taken_slugs(mock_uow, password_hasher):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.workspaces.slug_exists.side_effect = [True, True, False]

    result = await SignupUseCase(mock_uow, password_hasher).execute(command())

    assert result.value.workspace.slug == "acme-corp-2"


@pytest.mark.asyncio
async def test_signup_rejects_existing_email(mock_uow, password_hasher):
    mock_uow.users.get_by_email.return_value = User(email="owner@acme.com")

    result = await SignupUseCase(mock_uow, password_hasher).execute(command())

    assert result.is_err()
    assert result.error.code == "EMAIL_EXISTS"
    mock_uow.workspaces.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "not-an-email"},
        {"password": "12345"},
        {"password": "x" * 101},
        {"workspace_name": "   "},
        {"name": "n" * 101},
    ],
)
async def test_signup_validation_errors(mock_uow, password_hasher, overrides):
    result = await SignupUseCase(mock_uow, password_hasher).execute(command(**overrides))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.get_by_email.assert_not_awaited()


@pytest.mark.asyncio
async def test_storage_failure_becomes_server_error(mock_uow, password_hasher):
    mock_uow.users.get_by_email = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("db down"))
    )

    result = await SignupUseCase(mock_uow, password_hasher).execute(command())

    assert result.is_err()
    assert result.error.code == "SERVER_ERROR"
