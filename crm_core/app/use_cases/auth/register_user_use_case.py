"""
Register User Use Case

Join signup: creates a user with no workspace, typically right before
accepting an invitation.
"""

from crm_core.app.services.password_hasher import PasswordHasher
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import EMAIL_EXISTS, server_error_boundary
from crm_core.domain.entities import User
from crm_core.domain.normalize import normalize_email
from crm_core.libs.result import Error, Result, Return

from .dtos import RegisterUserCommand, RegisterUserResponse, UserInfo
from .validators import SIGNUP_PASSWORD_MIN_LENGTH, validate_email, validate_name, validate_password


class RegisterUserUseCase:
    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @server_error_boundary("Register user")
    async def execute(self, command: RegisterUserCommand) -> Result[RegisterUserResponse]:
        for check in (
            validate_name(command.name or "", "Name"),
            validate_email(command.email),
            validate_password(command.password, SIGNUP_PASSWORD_MIN_LENGTH),
        ):
            if check.is_err():
                return Return.err(check.error)

        email = normalize_email(command.email)

        async with self.uow:
            if await self.uow.users.get_by_email(email):
                return Return.err(Error(EMAIL_EXISTS, "Email already registered"))

            user = User(
                email=email,
                name=command.name or None,
                password_hash=self.password_hasher.hash(command.password),
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            return Return.ok(
                RegisterUserResponse(
                    user=UserInfo(id=str(user.id), email=user.email, name=user.name)
                )
            )
