import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import Base, build_engine, get_db

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
async def engine_test():
    # fresh in-memory database per test, foreign keys enforced
    engine = build_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest.fixture
def session_factory(engine_test):
    return async_sessionmaker(engine_test, class_=AsyncSession, expire_on_commit=False)

@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session

@pytest.fixture
async def initialized_app(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
async def client(initialized_app):
    async with AsyncClient(transport=ASGITransport(app=initialized_app), base_url="http://test") as ac:
        yield ac

@pytest.fixture
async def groceries(client):
    res = await client.post("/lists", json={"id": 1, "name": "Groceries"})
    assert res.status_code == 201
    return res.json()
