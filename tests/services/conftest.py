"""Service test fixtures - in-memory stores, SQLite-backed stores, FastAPI test clients.

Invariants:
    - Every test gets fresh stores (in-memory) or a fresh in-memory SQLite database
    - memory_client overrides get_marketplace_service with in-memory stores
    - sql_client patches db_manager so the real dependency runs against SQLite
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import datamart.infrastructure.database as db_module
import datamart.models  # noqa: F401
from datamart.api.dependencies import get_marketplace_service
from datamart.core.domain_types import StoreNamespace
from datamart.core.records import DataItem, Purchaser
from datamart.db.base import Base
from datamart.infrastructure.database import DatabaseSessionManager
from datamart.infrastructure.record_store import InMemoryRecordStore
from datamart.main import app
from datamart.services.marketplace import MarketplaceService


@pytest.fixture
def data_item_store():
    return InMemoryRecordStore(StoreNamespace.DATA_ITEMS, DataItem.from_snapshot)


@pytest.fixture
def purchaser_store():
    return InMemoryRecordStore(StoreNamespace.PURCHASERS, Purchaser.from_snapshot)


@pytest.fixture
def service(data_item_store, purchaser_store):
    return MarketplaceService(data_item_store, purchaser_store)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def memory_client(service):
    """FastAPI test client backed by the in-memory service fixture."""
    async def override_service():
        yield service

    app.dependency_overrides[get_marketplace_service] = override_service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def sql_client(test_engine, test_session_factory):
    """FastAPI test client running the real dependency against SQLite."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager
