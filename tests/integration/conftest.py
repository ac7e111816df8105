import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from crm_core.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from crm_core.adapter.services.memory_rate_limiter import InMemoryRateLimiter
from crm_core.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from crm_core.api.app import create_app
from crm_core.depends import (
    build_engine,
    get_change_password_rate_limiter,
    get_email_sender,
    get_password_hasher,
    get_reset_rate_limiter,
    get_session,
    get_unit_of_work,
)
from tests.utils.api_helpers import CapturingEmailSender


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def email_sender():
    return CapturingEmailSender()


@pytest_asyncio.fixture
async def client(db_session, email_sender):
    app = create_app(ApplicationConfig)

    password_hasher = BcryptPasswordHasher(rounds=4)
    reset_limiter = InMemoryRateLimiter(
        max_attempts=ApplicationConfig.RESET_RATE_LIMIT_MAX,
        window_seconds=ApplicationConfig.RESET_RATE_LIMIT_WINDOW_MINUTES * 60,
    )
    change_limiter = InMemoryRateLimiter(
        max_attempts=ApplicationConfig.CHANGE_PWD_RATE_LIMIT_MAX,
        window_seconds=ApplicationConfig.CHANGE_PWD_RATE_LIMIT_WINDOW_MINUTES * 60,
    )

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_reset_rate_limiter] = lambda: reset_limiter
    app.dependency_overrides[get_change_password_rate_limiter] = lambda: change_limiter

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


