from typing import AsyncGenerator, Tuple

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import settings

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _configure(url: str | None = None) -> Tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    global _engine, _session_factory
    if _engine is None or _session_factory is None:
        _engine = create_async_engine(url or settings.DATABASE_URL, future=True)
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _engine, _session_factory


def get_engine(url: str | None = None) -> AsyncEngine:
    return _configure(url)[0]


def get_session_factory(url: str | None = None) -> async_sessionmaker[AsyncSession]:
    return _configure(url)[1]


async def init_models(engine: AsyncEngine) -> None:
    """Create the history tables if they do not exist yet."""
    from ..models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        yield session
