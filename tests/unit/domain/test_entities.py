from datetime import datetime, timedelta
from uuid import uuid4

from crm_core.domain.entities import Invitation, InvitationStatus, MembershipRole, PasswordResetToken, User

NOW = datetime(2026, 1, 15, 12, 0, 0)


def invitation(**kwargs):
    defaults = dict(
        workspace_id=uuid4(),
        token_hash="0" * 64,
        role=MembershipRole.member,
        created_by_user_id=uuid4(),
        expires_at=NOW + timedelta(days=7),
    )
    defaults.update(kwargs)
    return Invitation(**defaults)


def test_pending_invitation():
    assert invitation().effective_status(NOW) == InvitationStatus.pending


def test_invitation_expires_strictly_after_expires_at():
    inv = invitation(expires_at=NOW)

    assert inv.effective_status(NOW) == InvitationStatus.pending
    assert inv.effective_status(NOW + timedelta(seconds=1)) == InvitationStatus.expired


def test_revoked_wins_over_expired():
    inv = invitation(expires_at=NOW - timedelta(days=1), revoked_at=NOW - timedelta(days=2))

    assert inv.effective_status(NOW) == InvitationStatus.revoked


def test_accepted_wins_over_expired():
    inv = invitation(expires_at=NOW - timedelta(days=1), accepted_at=NOW - timedelta(days=2))

    assert inv.effective_status(NOW) == InvitationStatus.accepted


def test_reset_token_usability():
    token = PasswordResetToken(user_id=uuid4(), token_hash="0" * 64, expires_at=NOW)

    assert token.is_usable(NOW)
    assert not token.is_usable(NOW + timedelta(seconds=1))

    token.used_at = NOW
    assert not token.is_usable(NOW)


def test_user_without_password_hash():
    assert not User(email="sso@example.com").has_password
    assert User(email="jane@example.com", password_hash="hash").has_password
