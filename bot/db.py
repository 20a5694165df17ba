"""Database configuration shared by the bot and the web backend."""

from __future__ import annotations

import ssl
from typing import Any, Dict, Optional

from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bot.config import DATABASE_SSL, DATABASE_URL
from db import Base, QueryLog


_ASYNC_DRIVERS = {"postgresql": "asyncpg", "sqlite": "aiosqlite"}
_SYNC_DRIVERS = {"postgresql": "psycopg2", "sqlite": None}


def _get_base_url() -> URL:
    if not DATABASE_URL:
        raise RuntimeError("DATABASE_URL not found")
    return make_url(DATABASE_URL)


def _with_driver(url: URL, drivers: Dict[str, Optional[str]]) -> URL:
    dialect = url.get_backend_name()
    if dialect not in drivers:
        return url
    driver = drivers[dialect]
    drivername = f"{dialect}+{driver}" if driver else dialect
    return url.set(drivername=drivername)


def to_async_url(url: Optional[URL] = None) -> str:
    base_url = url or BASE_DATABASE_URL
    return _with_driver(base_url, _ASYNC_DRIVERS).render_as_string(hide_password=False)


def to_sync_url(url: Optional[URL] = None) -> str:
    base_url = url or BASE_DATABASE_URL
    return _with_driver(base_url, _SYNC_DRIVERS).render_as_string(hide_password=False)


def _connect_args(url: URL) -> Dict[str, Any]:
    if url.get_backend_name() != "postgresql" or not DATABASE_SSL:
        return {}

    ssl_context = ssl.create_default_context()
    ssl_context.check_hostname = False
    ssl_context.verify_mode = ssl.CERT_NONE
    return {"ssl": ssl_context}


BASE_DATABASE_URL = _get_base_url()
ASYNC_DATABASE_URL = to_async_url(BASE_DATABASE_URL)
SYNC_DATABASE_URL = to_sync_url(BASE_DATABASE_URL)

async_engine = create_async_engine(
    ASYNC_DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=_connect_args(BASE_DATABASE_URL),
)

async_session = async_sessionmaker(
    async_engine,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def init_db() -> None:
    """Create tables if they do not exist."""

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = [
    "Base",
    "BASE_DATABASE_URL",
    "ASYNC_DATABASE_URL",
    "SYNC_DATABASE_URL",
    "to_async_url",
    "to_sync_url",
    "async_engine",
    "async_session",
    "AsyncSession",
    "init_db",
    "QueryLog",
]
