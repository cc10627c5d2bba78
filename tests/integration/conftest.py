"""Integration test configuration.

Integration tests run against the PostgreSQL database named by
``DATABASE__URL`` with migrations applied (``python scripts/run_migrations.py``).
They are skipped when that database is not reachable.
"""

import asyncio

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from blog.config import Settings
from blog.persistence.database import create_engine


async def _check_database() -> None:
    engine = create_engine(Settings())
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1 FROM comments LIMIT 1"))
    finally:
        await engine.dispose()


@pytest.fixture(scope="session", autouse=True)
def require_database():
    """Skip integration tests when no migrated database is available."""
    try:
        asyncio.run(_check_database())
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL with migrated schema not available: {e}")
