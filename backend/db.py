"""
Database connection pool for the page store.

All database access goes through page_conn().
Never use pool.acquire() directly outside this module.
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from uuid import UUID

import asyncpg

from backend.config import settings

logger = logging.getLogger(__name__)

pool: asyncpg.Pool | None = None


async def init_pool() -> None:
    """
    Initialize the connection pool.
    Called once at application startup.
    """
    global pool
    if not settings.DATABASE_URL:
        raise RuntimeError("DATABASE_URL is not set")
    pool = await asyncpg.create_pool(
        dsn=settings.DATABASE_URL,
        min_size=settings.DB_POOL_MIN_SIZE,
        max_size=settings.DB_POOL_MAX_SIZE,
        command_timeout=60,
        init=_init_connection,
    )
    logger.info("db: pool initialized (max_size=%d)", settings.DB_POOL_MAX_SIZE)


async def close_pool() -> None:
    """
    Close the connection pool.
    Called at application shutdown.
    """
    global pool
    if pool is not None:
        await pool.close()
        pool = None
        logger.info("db: pool closed")


async def _init_connection(conn: asyncpg.Connection) -> None:
    """UUIDs come back as uuid.UUID, JSONB as Python lists/dicts."""
    await conn.set_type_codec(
        "uuid",
        encoder=str,
        decoder=lambda x: UUID(x),
        schema="pg_catalog",
    )
    await conn.set_type_codec(
        "jsonb",
        encoder=json.dumps,
        decoder=json.loads,
        schema="pg_catalog",
    )


@asynccontextmanager
async def page_conn():
    """
    Acquire a connection inside a transaction.

    Usage:
        async with page_conn() as conn:
            row = await conn.fetchrow("SELECT * FROM pages WHERE id = $1", page_id)

    Yields:
        asyncpg.Connection
    """
    if pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")

    async with pool.acquire() as conn:
        async with conn.transaction():
            yield conn
