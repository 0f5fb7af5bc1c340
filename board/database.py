from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from board.config import settings

# Module-level engine variable allows tests to override with a test engine.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db():
    """Yield one session per request.  Commit/rollback is owned by the service."""
    async with async_session() as session:
        yield session


@asynccontextmanager
async def transaction(session: AsyncSession):
    """
    Scoped transaction block: commit on normal exit, roll back and
    re-raise on any exception.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise


async def create_schema(bind=None) -> None:
    """Create every mapped table that does not exist yet."""
    import board.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(bind=None) -> None:
    import board.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
