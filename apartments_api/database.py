from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from apartments_api.config import settings


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create the async engine for a database URL.

    In-memory SQLite lives inside a single connection, so it gets a StaticPool;
    server databases get pre-ping to survive dropped connections.
    """
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs.setdefault("poolclass", StaticPool)
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    elif not url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", settings.LOG_LEVEL == "debug")
    return create_async_engine(url, future=True, **kwargs)


engine = build_engine(settings.DATABASE_URL)

async_session = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


# FastAPI dependency
async def get_session():
    async with async_session() as session:
        yield session


async def ping(session: AsyncSession) -> None:
    """Round-trip to the database; raises if it is unreachable."""
    result = await session.execute(text("SELECT 1"))
    result.scalar()
