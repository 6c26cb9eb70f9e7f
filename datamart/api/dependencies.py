"""API Dependencies - builds the MarketplaceService and resolves the caller per request.

Invariants:
    - "sql" backend: each request gets its own AsyncSession, closed after the response
    - "memory" backend: both stores live for the process lifetime
    - Missing or blank X-Principal header resolves to the anonymous principal
    - A non-blank X-Principal is passed through verbatim, never trimmed

Design Decisions:
    - Route tests override get_marketplace_service via app.dependency_overrides
"""

from typing import AsyncGenerator

from fastapi import Header

from datamart.config import get_settings
from datamart.core.domain_types import Principal, StoreNamespace
from datamart.core.records import DataItem, Purchaser
from datamart.infrastructure import database
from datamart.infrastructure.record_store import InMemoryRecordStore, SqlRecordStore
from datamart.services.marketplace import MarketplaceService

CALLER_HEADER = "X-Principal"

# Process-wide stores for storage_backend="memory"
memory_data_items: InMemoryRecordStore[DataItem] = InMemoryRecordStore(
    StoreNamespace.DATA_ITEMS, DataItem.from_snapshot,
)
memory_purchasers: InMemoryRecordStore[Purchaser] = InMemoryRecordStore(
    StoreNamespace.PURCHASERS, Purchaser.from_snapshot,
)


async def get_marketplace_service() -> AsyncGenerator[MarketplaceService, None]:
    """FastAPI dependency: service wired to the configured storage backend."""
    settings = get_settings()
    if settings.storage_backend == "memory":
        yield MarketplaceService(
            memory_data_items, memory_purchasers,
            initial_page_size=settings.initial_page_size,
        )
        return

    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as db:
        yield MarketplaceService(
            SqlRecordStore(db, StoreNamespace.DATA_ITEMS, DataItem.from_snapshot),
            SqlRecordStore(db, StoreNamespace.PURCHASERS, Purchaser.from_snapshot),
            initial_page_size=settings.initial_page_size,
        )


async def get_caller(
    x_principal: str | None = Header(None, alias=CALLER_HEADER),
) -> Principal:
    """Opaque caller identity, compared for equality against owner/seller."""
    if x_principal and x_principal.strip():
        return Principal(x_principal)
    return Principal(get_settings().anonymous_principal)
