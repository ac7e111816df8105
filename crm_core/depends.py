import logging
from uuid import UUID

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from crm_core.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from crm_core.adapter.services.memory_rate_limiter import build_rate_limiter
from crm_core.adapter.services.smtp_email_sender import build_email_sender
from crm_core.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from crm_core.api.error import ClientError, raise_for_error
from crm_core.api.utils.jwt import verify_jwt
from crm_core.api.utils.workspace_cookie import (
    COOKIE_NAME,
    clear_preference_cookie,
    decode_preference,
)
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import NO_WORKSPACE
from crm_core.app.use_cases.workspaces import ResolveWorkspaceUseCase
from crm_core.domain.authorization import WorkspaceContext
from crm_core.libs.result import Error

logger = logging.getLogger(__name__)


def build_engine(db_uri: str) -> AsyncEngine:
    """
    Create the async engine.

    SQLite transactions start with BEGIN IMMEDIATE so that writers are
    serialized from their first statement, where row locks (FOR UPDATE)
    are not available. The driver's own implicit BEGIN is turned off so
    that SAVEPOINTs work as well.
    """
    engine = create_async_engine(db_uri, echo=False, future=True)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _disable_driver_begin(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine.sync_engine, "begin")
        def _begin_immediate(conn):
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


engine = build_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
email_sender = build_email_sender(ApplicationConfig)
reset_rate_limiter = build_rate_limiter(
    ApplicationConfig.RESET_RATE_LIMIT_MAX,
    ApplicationConfig.RESET_RATE_LIMIT_WINDOW_MINUTES,
)
change_password_rate_limiter = build_rate_limiter(
    ApplicationConfig.CHANGE_PWD_RATE_LIMIT_MAX,
    ApplicationConfig.CHANGE_PWD_RATE_LIMIT_WINDOW_MINUTES,
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher():
    return password_hasher


def get_email_sender():
    return email_sender


def get_reset_rate_limiter():
    return reset_rate_limiter


def get_change_password_rate_limiter():
    return change_password_rate_limiter


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UUID:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    payload = verify_jwt(credentials.credentials)

    try:
        return UUID(payload["user_id"])
    except (TypeError, KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


async def get_workspace_context(
    request: Request,
    response: Response,
    user_id: UUID = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> WorkspaceContext:
    """
    Dependency resolving the workspace the request acts on.

    Raises:
        ClientError: 409 NO_WORKSPACE when the user has no membership yet
    """
    cookie = request.cookies.get(COOKIE_NAME)
    preferred = decode_preference(cookie, user_id)

    result = await ResolveWorkspaceUseCase(uow).execute(user_id, preferred)
    if result.is_err():
        raise_for_error(result.error)

    if result.value is None:
        raise ClientError(
            Error(NO_WORKSPACE, "Create or join a workspace first"),
            status_code=status.HTTP_409_CONFLICT,
        )

    # Stale or forged preference
    if cookie and preferred != result.value.workspace_id:
        clear_preference_cookie(response)

    return result.value
