"""StoredRecord ORM - one row per record, both stores share the table.

Invariants:
    - Primary key is (namespace, record_id): ids never collide across stores
    - position is assigned once on first insert and kept on upsert
    - body holds the record snapshot as JSON

Design Decisions:
    - JSON body over per-entity columns: the stores are generic id -> record maps
    - position column gives values() a stable insertion order
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from datamart.db.base import Base


class StoredRecord(Base):
    """A record snapshot inside a numeric namespace."""
    __tablename__ = "records"
    __table_args__ = (
        Index("ix_records_namespace_position", "namespace", "position"),
    )

    namespace: Mapped[int] = mapped_column(Integer, primary_key=True)
    record_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    body: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
