"""
Migrations for the TeamDesk schema.
DATABASE_URL from teamdesk settings takes precedence over alembic.ini.
"""
from __future__ import annotations

import asyncio
from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import teamdesk.models  # noqa: F401
from teamdesk.core.config import settings
from teamdesk.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = settings.DATABASE_URL or config.get_main_option("sqlalchemy.url", "")

# Shared by offline SQL generation and live runs
CONTEXT_OPTIONS: dict[str, Any] = {
    "target_metadata": Base.metadata,
    "compare_type": True,
    "compare_server_default": True,
}


def _run(**options: Any) -> None:
    context.configure(**CONTEXT_OPTIONS, **options)
    with context.begin_transaction():
        context.run_migrations()


def _run_on_connection(connection: Connection) -> None:
    _run(connection=connection)


async def _run_online() -> None:
    engine = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_on_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _run(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(_run_online())
