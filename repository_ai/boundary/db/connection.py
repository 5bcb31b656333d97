"""
Database engines and sessions.

The async engine serves the API and the pipeline; the sync engine is only
used by create_tables. Sessions never autocommit, so each caller decides
where its transaction ends.

Dependencies: sqlalchemy, asyncpg, psycopg2, repository_ai.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from repository_ai.configs import get_settings


def get_engine() -> Engine:
    """Synchronous engine for schema maintenance."""
    db_config = get_settings().database
    return create_engine(db_config.database_url, echo=db_config.echo_sql, pool_pre_ping=True)


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Process-wide async engine. The pool is shared by all sessions.

    pool_pre_ping=True discards connections the server has dropped.

    Returns:
        AsyncEngine: Pooled asyncpg engine
    """
    db_config = get_settings().database
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker[AsyncSession]:
    """
    Session factory handed to DocumentStore and PgVectorStore.

    Args:
        engine: Engine to bind (defaults to the shared engine)
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    async with get_async_session_factory()() as session:
        yield session
