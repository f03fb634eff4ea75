"""
Shared test helpers.

Database tests run inside a single asyncio.run() call against a fresh
in-memory SQLite database.
"""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.models import Base


async def _with_session(fn):
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    try:
        async with session_factory() as session:
            return await fn(session)
    finally:
        await engine.dispose()


@pytest.fixture
def run_db():
    """Run `async fn(session)` against an empty database and return its result."""

    def run(fn):
        return asyncio.run(_with_session(fn))

    return run
