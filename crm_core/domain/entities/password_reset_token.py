"""
PasswordResetToken Entity

Secure password reset tokens.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from crm_core.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - secure password reset tokens.

    Business Rules:
    - Expires after PASSWORD_RESET_EXPIRY_MINUTES (30 by default)
    - Token is SHA-256 hash of 32 random bytes
    - Single-use: used_at is set after confirmation
    - Issuing a new token marks every unused token of the user as used
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_expires_at", "expires_at"),
        Index("idx_password_reset_user_used", "user_id", "used_at"),
    )

    def is_usable(self, now: Optional[datetime] = None) -> bool:
        return self.used_at is None and (now or utcnow()) <= self.expires_at
