"""
Fixtures for route tests.

Routes are mounted on a bare FastAPI app backed by an in-memory SQLite
database; the LLM client is replaced by a fake generator.
"""

from contextlib import asynccontextmanager

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.v1.router import api_router
from app.api.v1.routes.plans import get_gemini_client
from app.api.v1.routes.results import get_result_service
from app.db.session import get_async_db
from app.features.results import HyResultFetcher, ResultParserService
from app.models import Base

RESULT_PAGE = (
    "<table>"
    "<tr><td>Split</td><td>Time of Day</td><td>Time</td><td>Diff</td></tr>"
    "<tr><td>SkiErg Out</td><td>10:05:00</td><td>0:04:45</td><td>0:04:45</td></tr>"
    "<tr><td>Wall Balls</td><td>10:20:00</td><td>0:11:45</td><td>0:07:00</td></tr>"
    "<tr><td>Total Time</td><td>10:45:00</td><td>0:45:00</td><td>0:00:00</td></tr>"
    "</table>"
)


class FakeGenerator:
    """Stands in for GeminiClient."""

    def __init__(self):
        self.html = "<section class=\"week-section\">Week 1</section>"
        self.error = None
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.html


def _page_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/missing"):
        return httpx.Response(404, text="not found")
    return httpx.Response(200, text=RESULT_PAGE)


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def client(generator):
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        yield
        await engine.dispose()

    async def test_db():
        async with session_factory() as session:
            yield session

    app = FastAPI(lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")
    app.dependency_overrides[get_async_db] = test_db
    app.dependency_overrides[get_gemini_client] = lambda: generator
    app.dependency_overrides[get_result_service] = lambda: ResultParserService(
        HyResultFetcher(transport=httpx.MockTransport(_page_handler))
    )

    with TestClient(app) as test_client:
        yield test_client
