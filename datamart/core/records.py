"""Marketplace Records - the two entity kinds held by the record stores.

Invariants:
    - id and seller/owner are set once at creation and never overwritten by update
    - purchased_item only grows by append; entries may name ids absent from DataItems
    - to_snapshot produces a JSON-safe dict; from_snapshot reverses it

Design Decisions:
    - Pure dataclasses: the stores persist snapshots, the API maps them to schemas
"""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Mapping

from datamart.core.domain_types import DataItemId, Nat64, Principal, PurchaserId


@dataclass
class DataItem:
    """A listing offered by a seller."""

    id: DataItemId
    title: str
    description: str
    price: Nat64
    seller: Principal
    attachment_url: str
    data_format: str
    status: str
    quality: str
    rating: Nat64

    def to_snapshot(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> "DataItem":
        return cls(**{f.name: data[f.name] for f in fields(cls)})


@dataclass
class Purchaser:
    """A buyer profile with its purchase history."""

    id: PurchaserId
    owner: Principal
    name: str
    price: Nat64
    message: str
    purchased_item: list[DataItemId] = field(default_factory=list)

    def to_snapshot(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> "Purchaser":
        return cls(
            id=data["id"],
            owner=data["owner"],
            name=data["name"],
            price=data["price"],
            message=data["message"],
            purchased_item=list(data.get("purchased_item", [])),
        )


# Fields callers can never overwrite through an update payload
DATA_ITEM_PROTECTED_FIELDS: frozenset[str] = frozenset({"id", "seller"})
PURCHASER_PROTECTED_FIELDS: frozenset[str] = frozenset(
    {"id", "owner", "purchased_item"},
)


def merge_data_item(existing: DataItem, changes: Mapping[str, Any]) -> DataItem:
    """Overlay payload fields on a stored DataItem. Pure, returns a new record."""
    allowed = {
        k: v for k, v in changes.items()
        if k not in DATA_ITEM_PROTECTED_FIELDS
    }
    return replace(existing, **allowed)


def merge_purchaser(existing: Purchaser, changes: Mapping[str, Any]) -> Purchaser:
    """Overlay payload fields on a stored Purchaser. Pure, returns a new record."""
    allowed = {
        k: v for k, v in changes.items()
        if k not in PURCHASER_PROTECTED_FIELDS
    }
    return replace(
        existing, purchased_item=list(existing.purchased_item), **allowed,
    )
