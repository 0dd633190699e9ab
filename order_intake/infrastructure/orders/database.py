"""
SQL schema and engine setup for the order store.

Defines the orders table with SQLAlchemy Core and builds the async
engine. The schema is created on startup when it does not exist yet.
"""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import Column, DateTime, Integer, MetaData, Table, Text, func
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)

metadata = MetaData()

orders_table = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("phone", Text, nullable=False),
    Column("service", Text, nullable=False),
    Column("details", Text, nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    sqlite_autoincrement=True,
)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    database = url.database
    if not database or database == ":memory:":
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def create_order_engine(database_url: str, **engine_options: Any) -> AsyncEngine:
    """Build the async engine for the order store.

    Args:
        database_url: SQLAlchemy async URL, e.g. ``sqlite+aiosqlite:///orders.db``.
        **engine_options: Passed through to ``create_async_engine``.

    Returns:
        An AsyncEngine. No connection is opened yet.
    """
    _ensure_sqlite_directory(database_url)
    return create_async_engine(database_url, **engine_options)


async def init_schema(engine: AsyncEngine) -> None:
    """Create the orders table if it is missing."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Order store schema ready")
