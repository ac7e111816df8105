"""
Login Use Case

Thin credential check; the API layer turns the result into a session token.
"""

from crm_core.app.services.password_hasher import PasswordHasher
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import INVALID_CREDENTIALS, server_error_boundary
from crm_core.domain.normalize import normalize_email
from crm_core.libs.result import Error, Result, Return

from .dtos import LoginResponse, UserInfo

# Verified when the account is unknown so both paths cost one bcrypt check
_DUMMY_HASH = "$2b$10$CwTycUXWue0Thq9StjUM0uJ8.yLXD3RFu0xNp3Oe8vn8m7Kbyh1Yi"


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Email is normalized before lookup
    - Accounts without a password (external auth) cannot log in with a password
    - Same error for unknown email and wrong password
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @server_error_boundary("Login")
    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        invalid = Error(INVALID_CREDENTIALS, "Invalid email or password")

        if not email or not password:
            return Return.err(invalid)

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None or not user.has_password:
                self.password_hasher.verify(password, _DUMMY_HASH)
                return Return.err(invalid)

            if not self.password_hasher.verify(password, user.password_hash):
                return Return.err(invalid)

            return Return.ok(
                LoginResponse(user=UserInfo(id=str(user.id), email=user.email, name=user.name))
            )
