"""
Change Password Use Case

Authenticated in-place password change.
"""

import logging
from uuid import UUID

from crm_core.app.services.password_hasher import PasswordHasher
from crm_core.app.services.rate_limiter import RateLimiter
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import (
    NO_PASSWORD_SET,
    RATE_LIMITED,
    WRONG_PASSWORD,
    server_error_boundary,
    unauthorized,
)
from crm_core.domain.base import utcnow
from crm_core.libs.result import Error, Result, Return

from .dtos import ChangePasswordResponse
from .validators import validate_password

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing the password of the authenticated user.

    Business Rules:
    - Rate limited per user id, checked before anything else
    - RATE_LIMITED is reported as is: the caller is already identified
    - Accounts without a password fail with NO_PASSWORD_SET
    - Current password must match (WRONG_PASSWORD otherwise)
    - New hash and invalidation of unused reset tokens commit together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        rate_limiter: RateLimiter,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.rate_limiter = rate_limiter

    @server_error_boundary("Password change")
    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        if not self.rate_limiter.allow(str(user_id)):
            logger.warning("Rate limit exceeded for password change: %s", user_id)
            return Return.err(
                Error(RATE_LIMITED, "Too many attempts. Please try again later.")
            )

        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(unauthorized())

            if not user.has_password:
                return Return.err(
                    Error(NO_PASSWORD_SET, "This account does not use a password")
                )

            if not self.password_hasher.verify(current_password or "", user.password_hash):
                return Return.err(Error(WRONG_PASSWORD, "Current password is incorrect"))

            user.password_hash = self.password_hasher.hash(new_password)
            await self.uow.users.update(user)

            # Close the window for any reset link issued before the change
            await self.uow.password_reset_tokens.invalidate_unused_for_user(user.id, utcnow())

            await self.uow.commit()

            return Return.ok(
                ChangePasswordResponse(status="success", message="Password updated")
            )
