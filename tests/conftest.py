"""
Test fixtures for gemimiw API tests.
"""

import os
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test configuration before importing app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["API_VERSION"] = "1.0"

from gemimiw.main import app
from gemimiw.agent import get_generator
from gemimiw.agent.prompts import build_system_prompt
from gemimiw.db.models import Base
from gemimiw.db.session import get_session
from gemimiw.errors import GenerationError, Result


# One shared in-memory SQLite connection for the whole test run
test_engine = create_async_engine(
    "sqlite+aiosqlite:///:memory:",
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class FakeGenerator:
    """Stands in for the model provider and records what it was sent."""

    def __init__(self):
        self.calls: list[dict] = []
        self.fail = False

    async def generate(self, rules, contexts, prompt):
        self.calls.append(
            {
                "rules": rules,
                "contexts": contexts,
                "prompt": prompt,
                "system": build_system_prompt(rules, contexts),
            }
        )
        if self.fail:
            return Result(error=GenerationError("provider unavailable", {"model": "fake"}))
        return Result(data=f"reply to: {prompt}")


async def override_get_db():
    """Override database dependency for tests."""
    async with TestSessionLocal() as session:
        yield session


app.dependency_overrides[get_session] = override_get_db


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables before each test, drop after."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def generator():
    """Fake generator injected into the chat route."""
    fake = FakeGenerator()
    app.dependency_overrides[get_generator] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_generator, None)


@pytest.fixture
async def client(generator):
    """Async HTTP client for testing FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session():
    """Direct database session for test setup/assertions."""
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
async def session_uuid(client):
    """UUID of a freshly created session."""
    response = await client.post("/1.0/sessions/create")
    return response.json()["data"]["uuid"]


@pytest.fixture
async def lenient_client(generator):
    """Client that returns 500 responses instead of re-raising server errors."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
