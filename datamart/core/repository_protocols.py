"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Record persistence is accessed only through RecordStore
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can pass any fake
    - Async methods: implementations do IO, the service awaits them
    - values() order is insertion order; an upsert keeps a record's position
"""

from typing import Protocol, TypeVar

R = TypeVar("R")


class RecordStore(Protocol[R]):
    """Ordered id -> record mapping, one instance per namespace."""
    async def get(self, record_id: str) -> R | None: ...
    async def insert(self, record_id: str, record: R) -> None: ...
    async def remove(self, record_id: str) -> R | None: ...
    async def values(self) -> list[R]: ...
