"""
Test infrastructure for the Blog API.

Strategy
--------
- Settings are read at import time, so the environment is prepared before
  anything from ``blog_api`` is imported: a throwaway DATABASE_URL (the
  real engine is never built because the lifespan does not run under
  ASGITransport) and the minimum bcrypt cost to keep hashing fast.
- SQLite in-memory via aiosqlite with StaticPool: every session shares the
  one connection, which is required because an in-memory database is
  connection-scoped.  Foreign keys are switched on so ON DELETE CASCADE
  and FK violations behave as they do on Postgres.
- The app's ``get_session_factory`` dependency is overridden so every
  request-scoped repository talks to the test engine.
- All tables are created fresh before each test and dropped after.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import blog_api.models  # noqa: E402,F401
from blog_api.database import Base, create_session_factory, enable_sqlite_foreign_keys  # noqa: E402
from blog_api.dependencies import get_session_factory  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.middleware import install_query_counter  # noqa: E402

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

enable_sqlite_foreign_keys(engine_test)
install_query_counter(engine_test)

session_factory_test = create_session_factory(engine_test)


# ---------------------------------------------------------------------------
# Dependency override — point every repository at the test engine
# ---------------------------------------------------------------------------

app.dependency_overrides[get_session_factory] = lambda: session_factory_test
app.state.engine = engine_test


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def session_factory():
    """The test session factory, for exercising the SQL repositories directly."""
    return session_factory_test


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
