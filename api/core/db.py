"""
asyncpg pool for the boards service.

The app lifespan in `api/main.py` opens the pool once per process and closes
it on shutdown. Repositories go through `fetch_one` / `fetch_all`; queries use
asyncpg's positional placeholders ($1, $2, ...). Tables are defined in
`sql/boards.sql`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings

logger = logging.getLogger(__name__)

# libpq understands sslmode, asyncpg's DSN parser chokes on some values of it.
DROPPED_DSN_PARAMS = frozenset({"sslmode"})

_pool: asyncpg.Pool | None = None


@dataclass(frozen=True)
class PoolSettings:
    dsn: str
    min_size: int = 1
    max_size: int = 5
    command_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "PoolSettings":
        min_size = max(settings.env_int("DB_POOL_MIN_SIZE", cls.min_size), 0)
        return cls(
            dsn=database_url(),
            min_size=min_size,
            max_size=max(settings.env_int("DB_POOL_MAX_SIZE", cls.max_size), min_size, 1),
            command_timeout=float(settings.env_int("DB_COMMAND_TIMEOUT", int(cls.command_timeout))),
        )


def database_url() -> str:
    raw = settings.env_str("DATABASE_URL")
    if not raw:
        raise RuntimeError("DATABASE_URL is not set.")

    parts = urlsplit(raw)
    if not parts.query:
        return raw
    kept = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in DROPPED_DSN_PARAMS
    ]
    return urlunsplit(parts._replace(query=urlencode(kept)))


async def init_pool(config: PoolSettings | None = None) -> None:
    global _pool
    if _pool is not None:
        return
    config = config or PoolSettings.from_env()
    _pool = await asyncpg.create_pool(
        dsn=config.dsn,
        min_size=config.min_size,
        max_size=config.max_size,
        command_timeout=config.command_timeout,
    )
    logger.info("db_pool_opened min_size=%s max_size=%s", config.min_size, config.max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return
    current, _pool = _pool, None
    await current.close()
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def ping() -> bool:
    """True when the pool can run a trivial query."""
    try:
        return await pool().fetchval("SELECT 1") == 1
    except Exception:
        logger.warning("db_ping_failed", exc_info=True)
        return False


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return None if row is None else dict(row)


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    return [dict(row) for row in await pool().fetch(sql, *args)]
