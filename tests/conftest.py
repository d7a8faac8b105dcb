import asyncpg
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from blogpessoal.app import create_app
from blogpessoal.config import Settings
from blogpessoal.db_context import DatabaseManager
from blogpessoal.dependencies import get_password_hasher
from blogpessoal.schema import create_schema, truncate_all
from blogpessoal.security import PasswordHasher

POOL_NAME = "default"


@pytest.fixture(scope="session")
def postgres_container():
    """Start a PostgreSQL test container for the session."""
    with PostgresContainer("postgres:17") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_dsn(postgres_container) -> str:
    host = postgres_container.get_container_host_ip()
    port = postgres_container.get_exposed_port(5432)
    return f"postgresql://{postgres_container.username}:{postgres_container.password}@{host}:{port}/{postgres_container.dbname}"


@pytest_asyncio.fixture
async def test_db_pool(postgres_dsn):
    """Pool connected to the test container, with the blog schema, for each test."""
    # A new pool per test avoids event loop issues
    pool = await asyncpg.create_pool(postgres_dsn, min_size=1, max_size=5)
    await create_schema(pool)
    await DatabaseManager.add_pool(POOL_NAME, pool)

    yield pool

    await truncate_all(pool)
    await DatabaseManager.close_pool(POOL_NAME)


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    return PasswordHasher(iterations=1_000)


@pytest_asyncio.fixture
async def client(test_db_pool, fast_hasher):
    """HTTP client against the app; the pool is registered by test_db_pool."""
    app = create_app(Settings(create_schema=False))
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
