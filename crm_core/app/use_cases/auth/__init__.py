"""
Authentication Use Cases

Signup, login and the password lifecycle.
"""

from .signup_use_case import SignupUseCase
from .register_user_use_case import RegisterUserUseCase
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import (
    SignupCommand,
    RegisterUserCommand,
    SignupResponse,
    RegisterUserResponse,
    LoginResponse,
    RequestPasswordResetResponse,
    ResetDebugInfo,
    ConfirmPasswordResetResponse,
    ChangePasswordResponse,
    UserInfo,
    WorkspaceCreated,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "RegisterUserUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "ChangePasswordUseCase",
    # DTOs - Commands
    "SignupCommand",
    "RegisterUserCommand",
    # DTOs - Responses
    "SignupResponse",
    "RegisterUserResponse",
    "LoginResponse",
    "RequestPasswordResetResponse",
    "ResetDebugInfo",
    "ConfirmPasswordResetResponse",
    "ChangePasswordResponse",
    # DTOs - Nested Models
    "UserInfo",
    "WorkspaceCreated",
]
