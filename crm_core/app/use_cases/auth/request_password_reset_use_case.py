"""
Request Password Reset Use Case

Handles generating and sending password reset tokens.
"""

import logging
from datetime import timedelta
from typing import Optional
from urllib.parse import urlencode

from config import ApplicationConfig
from crm_core.app.services.email_sender import PASSWORD_RESET_TEMPLATE, EmailSender, EmailTemplate
from crm_core.app.services.rate_limiter import RateLimiter
from crm_core.app.services.token_issuer import issue_token
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.domain.base import utcnow
from crm_core.domain.entities import PasswordResetToken
from crm_core.domain.normalize import normalize_email
from crm_core.libs.result import Result, Return

from .dtos import RequestPasswordResetResponse, ResetDebugInfo, ResetDebugReason
from .validators import validate_email

logger = logging.getLogger(__name__)

SENT_MESSAGE = "If the email exists, a password reset link has been sent"


def build_reset_link(app_url: str, raw_token: str) -> str:
    return f"{app_url.rstrip('/')}/reset-password?{urlencode({'token': raw_token})}"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Rate limited per normalized email; a blocked request still reports success
    - No email enumeration: unknown email, password-less account, rate limit
      and delivery failure all return the same response
    - Issuing a token invalidates every unused token of the user
    - Only the SHA-256 hash of the token is stored
    - Debug details are attached outside production only
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: EmailSender,
        rate_limiter: RateLimiter,
        config=ApplicationConfig,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.rate_limiter = rate_limiter
        self.config = config

    def _response(
        self, sent: bool, reason: Optional[ResetDebugReason] = None
    ) -> Result[RequestPasswordResetResponse]:
        debug = None
        if not self.config.is_production():
            debug = ResetDebugInfo(sent=sent, reason=reason)
        return Return.ok(
            RequestPasswordResetResponse(status="sent", message=SENT_MESSAGE, debug=debug)
        )

    @server_error_boundary("Password reset request")
    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Email address as typed by the user

        Returns:
            Result with the same success response in every non-validation case,
            or VALIDATION_ERROR for a malformed email
        """
        validation = validate_email(email)
        if validation.is_err():
            return Return.err(validation.error)

        normalized_email = normalize_email(email)

        if not self.rate_limiter.allow(normalized_email):
            logger.warning("Rate limit exceeded for password reset: %s", normalized_email)
            return self._response(sent=False, reason="rate_limited")

        async with self.uow:
            user = await self.uow.users.get_by_email(normalized_email)

            if user is None:
                logger.info("Password reset requested for unknown email: %s", normalized_email)
                return self._response(sent=False, reason="user_not_found")

            if not user.has_password:
                logger.info("Password reset requested for password-less account: %s", normalized_email)
                return self._response(sent=False, reason="oauth_user")

            now = utcnow()
            await self.uow.password_reset_tokens.invalidate_unused_for_user(user.id, now)

            issued = issue_token()
            reset_token = PasswordResetToken(
                user_id=user.id,
                token_hash=issued.token_hash,
                expires_at=now + timedelta(minutes=self.config.PASSWORD_RESET_EXPIRY_MINUTES),
            )
            await self.uow.password_reset_tokens.create(reset_token)

            await self.uow.commit()

            recipient, user_name = user.email, user.name

        template = EmailTemplate(
            name=PASSWORD_RESET_TEMPLATE,
            data={
                "reset_link": build_reset_link(self.config.APP_URL, issued.raw),
                "user_name": user_name or "",
                "expiry_minutes": str(self.config.PASSWORD_RESET_EXPIRY_MINUTES),
            },
        )
        if not await self.email_sender.send(recipient, template):
            logger.error("Failed to send password reset email to: %s", normalized_email)
            return self._response(sent=False, reason="smtp_failed")

        return self._response(sent=True)
