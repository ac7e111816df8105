from fastapi import status

from crm_core.app.use_cases import errors as codes
from crm_core.domain.authorization import LAST_OWNER_VIOLATION, SELF_DEACTIVATION
from crm_core.libs.result import Error

# Tenant-scoped lookups never reveal whether a resource exists elsewhere
FORBIDDEN_MESSAGE = "You do not have access to this resource"

STATUS_BY_CODE = {
    codes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    codes.INVALID: status.HTTP_400_BAD_REQUEST,
    codes.TOKEN_INVALID: status.HTTP_400_BAD_REQUEST,
    codes.NO_PASSWORD_SET: status.HTTP_400_BAD_REQUEST,
    codes.WRONG_PASSWORD: status.HTTP_400_BAD_REQUEST,
    SELF_DEACTIVATION: status.HTTP_400_BAD_REQUEST,
    codes.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    codes.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    codes.NOT_FOUND: status.HTTP_403_FORBIDDEN,
    codes.USED: status.HTTP_409_CONFLICT,
    codes.EMAIL_EXISTS: status.HTTP_409_CONFLICT,
    codes.NO_WORKSPACE: status.HTTP_409_CONFLICT,
    LAST_OWNER_VIOLATION: status.HTTP_409_CONFLICT,
    codes.REVOKED: status.HTTP_410_GONE,
    codes.EXPIRED: status.HTTP_410_GONE,
    codes.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Translate a use case error into the matching HTTP exception"""
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    if status_code == status.HTTP_403_FORBIDDEN:
        error = Error(error.code, FORBIDDEN_MESSAGE)
    raise ClientError(error, status_code=status_code)
