"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Literal, Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    password: str
    workspace_name: str
    name: Optional[str] = None


class RegisterUserCommand(BaseModel):
    """Join signup command - creates a user without a workspace"""

    email: str
    password: str
    name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    email: str
    name: Optional[str] = None


class WorkspaceCreated(BaseModel):
    """Workspace information in signup response"""

    id: str
    name: str
    slug: str


class SignupResponse(BaseModel):
    """Response for signup use case"""

    user: UserInfo
    workspace: WorkspaceCreated


class RegisterUserResponse(BaseModel):
    """Response for join signup use case"""

    user: UserInfo


class LoginResponse(BaseModel):
    """Response for login use case"""

    user: UserInfo


ResetDebugReason = Literal["user_not_found", "oauth_user", "smtp_failed", "rate_limited"]


class ResetDebugInfo(BaseModel):
    """Internal delivery outcome, only exposed outside production"""

    sent: bool
    reason: Optional[ResetDebugReason] = None


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str
    debug: Optional[ResetDebugInfo] = None


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str


class ChangePasswordResponse(BaseModel):
    """Response for change password use case"""

    status: str
    message: str
