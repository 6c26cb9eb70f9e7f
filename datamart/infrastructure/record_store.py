"""Record Stores - SQL-backed and in-memory implementations of RecordStore.

Invariants:
    - Each instance is bound to one StoreNamespace; instances never see each other's rows
    - insert is an upsert: a new id is appended, an existing id keeps its position
    - values() returns records in insertion order
    - SqlRecordStore commits after every mutation (single-key atomicity)

Design Decisions:
    - Records cross the boundary as dataclasses; stores persist to_snapshot() dicts
    - InMemoryRecordStore keeps snapshots, not live objects, so callers cannot
      mutate stored state without calling insert
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Generic, Mapping, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from datamart.core.domain_types import StoreNamespace
from datamart.models.stored_record import StoredRecord

logger = logging.getLogger(__name__)

R = TypeVar("R")

Decoder = Callable[[Mapping[str, Any]], R]


def _snapshot(record: Any) -> dict[str, Any]:
    return record.to_snapshot()


class SqlRecordStore(Generic[R]):
    """RecordStore over the shared `records` table."""

    def __init__(
        self,
        db: AsyncSession,
        namespace: StoreNamespace,
        decode: Decoder,
    ):
        self._db = db
        self._namespace = int(namespace)
        self._decode = decode

    async def _load(self, record_id: str) -> StoredRecord | None:
        return await self._db.get(StoredRecord, (self._namespace, record_id))

    async def _next_position(self) -> int:
        result = await self._db.execute(
            select(func.coalesce(func.max(StoredRecord.position), 0))
            .where(StoredRecord.namespace == self._namespace),
        )
        return int(result.scalar_one()) + 1

    async def get(self, record_id: str) -> R | None:
        row = await self._load(record_id)
        return self._decode(row.body) if row else None

    async def insert(self, record_id: str, record: R) -> None:
        row = await self._load(record_id)
        body = _snapshot(record)
        if row is None:
            self._db.add(StoredRecord(
                namespace=self._namespace,
                record_id=record_id,
                position=await self._next_position(),
                body=body,
            ))
        else:
            row.body = body
            row.updated_at = datetime.now(timezone.utc)
        await self._db.commit()
        logger.debug(
            f"Stored record {record_id}",
            extra={"record_id": record_id, "namespace": self._namespace},
        )

    async def remove(self, record_id: str) -> R | None:
        row = await self._load(record_id)
        if row is None:
            return None
        record = self._decode(row.body)
        await self._db.delete(row)
        await self._db.commit()
        return record

    async def values(self) -> list[R]:
        result = await self._db.execute(
            select(StoredRecord)
            .where(StoredRecord.namespace == self._namespace)
            .order_by(StoredRecord.position),
        )
        return [self._decode(row.body) for row in result.scalars().all()]


class InMemoryRecordStore(Generic[R]):
    """RecordStore over a dict (insertion-ordered). Not durable."""

    def __init__(self, namespace: StoreNamespace, decode: Decoder):
        self._namespace = namespace
        self._decode = decode
        self._rows: dict[str, dict[str, Any]] = {}

    async def get(self, record_id: str) -> R | None:
        body = self._rows.get(record_id)
        return self._decode(body) if body is not None else None

    async def insert(self, record_id: str, record: R) -> None:
        self._rows[record_id] = _snapshot(record)
        logger.debug(
            f"Stored record {record_id}",
            extra={"record_id": record_id, "namespace": int(self._namespace)},
        )

    async def remove(self, record_id: str) -> R | None:
        body = self._rows.pop(record_id, None)
        return self._decode(body) if body is not None else None

    async def values(self) -> list[R]:
        return [self._decode(body) for body in self._rows.values()]

    def clear(self) -> None:
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)
