from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from commerce_services.app import app
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.config.dependencies import get_settings, reset_memory_store
from commerce_services.infrastructure.config.settings import Settings
from commerce_services.infrastructure.persistence.database import get_session
from commerce_services.infrastructure.persistence.models import table_registry


class BaseIntegrationTest:
    """Base class for integration tests against an in-memory SQLite database"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create test database engine"""
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session
        app.dependency_overrides[get_settings] = lambda: Settings(STORAGE_BACKEND="sqlalchemy")

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


class BaseMemoryBackendTest:
    """Base class for HTTP tests that run against the in-memory collections"""

    @pytest_asyncio.fixture
    async def client(self):
        async def no_session():
            yield None

        reset_memory_store()
        app.dependency_overrides[get_session] = no_session
        app.dependency_overrides[get_settings] = lambda: Settings(STORAGE_BACKEND="memory")

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()
        reset_memory_store()


# Shared fixtures for use case testing
@pytest.fixture
def mock_product_repository():
    """Mock product repository for use case testing"""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_order_repository():
    return AsyncMock(spec=OrderRepository)


@pytest.fixture
def mock_api_object_repository():
    return AsyncMock(spec=ApiObjectRepository)
