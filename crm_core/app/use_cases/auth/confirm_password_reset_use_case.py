"""
Confirm Password Reset Use Case

Handles password reset confirmation with secure token validation.
"""

import logging

from crm_core.app.services.password_hasher import PasswordHasher
from crm_core.app.services.token_issuer import hash_token
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import TOKEN_INVALID, server_error_boundary
from crm_core.domain.base import utcnow
from crm_core.libs.result import Error, Result, Return

from .dtos import ConfirmPasswordResetResponse
from .validators import validate_password

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is looked up by its SHA-256 hash
    - Unknown, expired and used tokens all fail with the same TOKEN_INVALID
    - New password must be 8 to 100 characters
    - The token is consumed with a conditional update before the password
      changes; a caller that loses a concurrent race gets TOKEN_INVALID
    - Password hash update and token consumption happen in one transaction
    - Existing sessions are left to the session layer
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @server_error_boundary("Password reset")
    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email link)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - VALIDATION_ERROR: Password does not meet the policy
            - TOKEN_INVALID: Token not found, expired or already used
        """
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        invalid = Error(TOKEN_INVALID, "Invalid or expired password reset link")
        if not token:
            return Return.err(invalid)

        # Hashed before the transaction opens
        password_hash = self.password_hasher.hash(new_password)

        async with self.uow:
            now = utcnow()
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(hash_token(token))
            if reset_token is None or not reset_token.is_usable(now):
                return Return.err(invalid)

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                return Return.err(invalid)

            if not await self.uow.password_reset_tokens.mark_used(reset_token.id, now):
                return Return.err(invalid)

            user.password_hash = password_hash
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info("Password reset completed for user %s", user.id)

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
