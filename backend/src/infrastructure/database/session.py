"""Async engine, declarative base and per-request sessions."""

from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import get_settings, get_logger


logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""
    pass


def _build_engine():
    settings = get_settings()
    engine_kwargs = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }
    # SQLite uses a single-connection pool that takes no sizing arguments
    if not settings.is_sqlite:
        engine_kwargs["pool_size"] = settings.database_pool_size
        engine_kwargs["max_overflow"] = settings.database_max_overflow
    
    return create_async_engine(settings.database_url, **engine_kwargs)


engine = _build_engine()

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """
    Yield a session scoped to one unit of work.
    
    Uncommitted work is rolled back and the connection is returned to the
    pool on exit, including when the awaiting task is cancelled.
    """
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_db() -> None:
    """Dispose the engine and close pooled connections."""
    await engine.dispose()
    logger.info("Database connections closed")
