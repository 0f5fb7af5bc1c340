"""
Shared fixtures for the post board tests.

Every test runs against a private in-memory SQLite database (aiosqlite).
A single StaticPool connection keeps that database alive across the
sessions a test opens, and the posts table is rebuilt around each test so
auto-assigned ids restart at 1 and scenarios can assert literal ids.
"""
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from board.database import Base, get_db
from board.main import app
from board.repository import SqlAlchemyPostRepository
from board.services.post_service import PostService

# ---------------------------------------------------------------------------
# In-memory engine shared by the app and the direct-session fixtures
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Route the app's get_db to the in-memory engine
# ---------------------------------------------------------------------------

async def override_get_db():
    # No commit here: PostService commits or rolls back every operation itself,
    # so the request session mirrors production get_db exactly.
    async with async_session_test() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Start every test from an empty posts table with ids beginning at 1."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """Session for repository tests and for inspecting rows behind the service."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def post_service(db_session: AsyncSession) -> PostService:
    """PostService wired the way get_post_service wires it, minus HTTP."""
    return PostService(SqlAlchemyPostRepository(db_session), db_session)


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """HTTP client calling the app in-process; the lifespan hook is not run."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
