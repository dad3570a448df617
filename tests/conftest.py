"""
Test infrastructure for the article persistence layer.

Strategy
--------
- SQLite in-memory via aiosqlite eliminates the need for a running Postgres
  instance in CI, keeping the suite fast and self-contained.
- StaticPool forces all async tasks to share the same in-memory database
  connection, which is required because SQLite in-memory databases are
  connection-scoped; a new connection would see an empty database.
- Foreign keys are switched on at connect so a missing author or a tag row
  without its article fails the same way it does on PostgreSQL.
- All tables are created fresh before each test and dropped after, giving
  each test a clean isolated state without needing transactions or truncation.
"""
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from conduit.database import Base, install_sqlite_foreign_keys
from conduit.models import User
from conduit.repo.article_persistence import ArticleStore, UserId

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_sqlite_foreign_keys(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


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
async def db_session() -> AsyncSession:
    """
    Yield a live AsyncSession for tests that need to interact with the
    database directly (e.g. seeding users, asserting stored rows).
    """
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def article_store() -> ArticleStore:
    return ArticleStore(async_session_test)


@pytest_asyncio.fixture
async def author_id(db_session: AsyncSession) -> UserId:
    """Commit one user so articles have an author to reference."""
    user = User(username="author", email="author@example.com", bio="Writes things")
    db_session.add(user)
    await db_session.commit()
    return UserId(user.id)


@pytest.fixture
def test_engine():
    """The shared test engine, for tests that attach engine event listeners."""
    return engine_test
