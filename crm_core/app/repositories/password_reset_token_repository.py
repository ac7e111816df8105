from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from crm_core.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get token by hash, whatever its state"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: UUID, now: datetime) -> bool:
        """
        Consume a token that is still unused and unexpired.

        Returns False when the token was already spent, so a token can
        only ever be redeemed once.
        """
        pass

    @abstractmethod
    async def invalidate_unused_for_user(self, user_id: UUID, now: datetime) -> int:
        """Mark every unused token of a user as used. Returns count of invalidated tokens."""
        pass
