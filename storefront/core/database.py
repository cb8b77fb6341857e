"""
Async engine and session handling for the storefront database
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict
import logging

from .config import settings

logger = logging.getLogger(__name__)

def _engine_options(url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.DATABASE_ECHO}
    if url.startswith("sqlite"):
        # One connection per session, no pool sizing on SQLite
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_timeout=settings.DATABASE_POOL_TIMEOUT,
            pool_pre_ping=True,
        )
    return options

engine = create_async_engine(
    settings.database_url_async,
    **_engine_options(settings.database_url_async),
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Session scope for startup tasks and scripts.
    Commits on clean exit, rolls back and re-raises otherwise.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request"""
    async with get_db_context() as session:
        yield session

async def init_db() -> None:
    """Create any missing tables"""
    from storefront.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Storefront tables ready (%s)", engine.url.get_backend_name())

async def close_db() -> None:
    await engine.dispose()
    logger.info("Database engine disposed")
