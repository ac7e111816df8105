from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from crm_core.api.error import raise_for_error
from crm_core.api.utils.jwt import create_access_token
from crm_core.api.utils.workspace_cookie import set_preference_cookie
from crm_core.app.services.email_sender import EmailSender
from crm_core.app.services.password_hasher import PasswordHasher
from crm_core.app.services.rate_limiter import RateLimiter
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.auth import (
    ChangePasswordResponse,
    ChangePasswordUseCase,
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    LoginUseCase,
    RegisterUserCommand,
    RegisterUserResponse,
    RegisterUserUseCase,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
)
from crm_core.depends import (
    get_change_password_rate_limiter,
    get_current_user,
    get_email_sender,
    get_password_hasher,
    get_reset_rate_limiter,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class AccessToken(BaseModel):
    access_token: str
    token_type: str = "bearer"


class SignupTokenResponse(SignupResponse, AccessToken):
    """Signup response with an access token for the new user"""


class RegisterTokenResponse(RegisterUserResponse, AccessToken):
    """Join signup response with an access token for the new user"""


class LoginTokenResponse(LoginResponse, AccessToken):
    """Login response with an access token"""


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 6 chars)")
    workspace_name: str = Field(..., description="Workspace name")
    name: Optional[str] = Field(None, description="Display name")


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupTokenResponse
)
async def signup(
    request: SignupRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Signup

    Creates a user with their own workspace and OWNER membership, and
    selects that workspace.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: EMAIL_EXISTS
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        email=request.email,
        password=request.password,
        workspace_name=request.workspace_name,
        name=request.name,
    )

    result = await SignupUseCase(uow, password_hasher).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    user_id = UUID(result.value.user.id)
    set_preference_cookie(response, user_id, UUID(result.value.workspace.id))

    return SignupTokenResponse(
        **result.value.model_dump(), access_token=create_access_token(user_id)
    )


class RegisterRequest(BaseModel):
    """Join signup HTTP request payload (invitees, no workspace)"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 6 chars)")
    name: Optional[str] = Field(None, description="Display name")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterTokenResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Join Signup

    Creates only the user; the workspace comes from accepting an invitation.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: EMAIL_EXISTS
    """
    command = RegisterUserCommand(
        email=request.email, password=request.password, name=request.name
    )

    result = await RegisterUserUseCase(uow, password_hasher).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    return RegisterTokenResponse(
        **result.value.model_dump(),
        access_token=create_access_token(UUID(result.value.user.id)),
    )


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginTokenResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    result = await LoginUseCase(uow, password_hasher).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    return LoginTokenResponse(
        **result.value.model_dump(),
        access_token=create_access_token(UUID(result.value.user.id)),
    )


class RequestPasswordResetRequest(BaseModel):
    """
    Request password reset HTTP request payload

    Validates incoming request for password reset.
    """

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/password/forgot",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
    response_model_exclude_none=True,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
    rate_limiter: RateLimiter = Depends(get_reset_rate_limiter),
):
    """
    Request Password Reset

    Always answers with the same body, whether or not the account exists.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
    """
    use_case = RequestPasswordResetUseCase(uow, email_sender, rate_limiter)
    result = await use_case.execute(request.email)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ConfirmPasswordResetRequest(BaseModel):
    """
    Confirm password reset HTTP request payload

    Validates incoming request for password reset confirmation.
    """

    token: str = Field(..., description="Password reset token from email")
    new_password: str = Field(..., description="New password (8 to 100 chars)")


@router.post(
    "/password/reset",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, TOKEN_INVALID
    """
    use_case = ConfirmPasswordResetUseCase(uow, password_hasher)
    result = await use_case.execute(request.token, request.new_password)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangePasswordRequest(BaseModel):
    """Change password HTTP request payload"""

    current_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="New password (8 to 100 chars)")


@router.post(
    "/password/change",
    status_code=status.HTTP_200_OK,
    response_model=ChangePasswordResponse,
)
async def change_password(
    request: ChangePasswordRequest,
    user_id: UUID = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    rate_limiter: RateLimiter = Depends(get_change_password_rate_limiter),
):
    """
    Change Password

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, NO_PASSWORD_SET, WRONG_PASSWORD
        - 401 Unauthorized: Invalid or expired JWT
        - 429 Too Many Requests: RATE_LIMITED
    """
    use_case = ChangePasswordUseCase(uow, password_hasher, rate_limiter)
    result = await use_case.execute(user_id, request.current_password, request.new_password)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
