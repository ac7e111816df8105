"""
Error codes shared by use cases, and the boundary that turns storage
failures into SERVER_ERROR results.
"""

import functools
import logging

from sqlalchemy.exc import SQLAlchemyError

from crm_core.libs.result import Error, Return

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"
RATE_LIMITED = "RATE_LIMITED"
SERVER_ERROR = "SERVER_ERROR"

# Invitation token outcomes
INVALID = "INVALID"
REVOKED = "REVOKED"
USED = "USED"
EXPIRED = "EXPIRED"

# Password flows
TOKEN_INVALID = "TOKEN_INVALID"
NO_PASSWORD_SET = "NO_PASSWORD_SET"
WRONG_PASSWORD = "WRONG_PASSWORD"
EMAIL_EXISTS = "EMAIL_EXISTS"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

NO_WORKSPACE = "NO_WORKSPACE"


def unauthorized() -> Error:
    return Error(UNAUTHORIZED, "You are not allowed to perform this action")


def server_error_boundary(operation: str):
    """
    Wrap a use case execute() coroutine.

    Storage errors are logged with their traceback and returned as
    SERVER_ERROR. Any other exception propagates untouched, so framework
    control-flow signals are never swallowed.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError:
                logger.exception("%s failed", operation)
                return Return.err(Error(SERVER_ERROR, "Internal server error"))

        return wrapper

    return decorator
