"""Fixtures driving the FastAPI app against a private in-memory SQLite database."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from docarchive.config import Settings, get_settings
from docarchive.infrastructure.database import Base, get_db_session
from docarchive.main import app


@pytest.fixture
def app_settings() -> Settings:
    """Settings seen by the endpoints; tests may flip the policy flags."""
    return Settings(_env_file=None, template_delete_policy="orphan", strict_archive_requests=False)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory, app_settings) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client with the DB session and settings dependencies overridden."""

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: app_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def template_id(client: AsyncClient) -> int:
    """The marriage-contract template: one required client-reference field."""
    response = await client.post(
        "/api/templates",
        json={
            "name": "عقد زواج",
            "fields": [{"id": "field_1", "type": "client", "required": True}],
            "questions": [],
        },
    )
    assert response.status_code == 201
    return response.json()["id"]
