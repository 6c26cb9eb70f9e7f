"""Marketplace Records - tests for snapshots and merge rules.

Tests cover:
    - snapshot round trip preserves every field
    - merge never overwrites id / seller / owner / purchased_item
    - merge returns a new record, leaving the original untouched
"""

from datamart.core.domain_types import DataItemId, Nat64, Principal, PurchaserId
from datamart.core.records import (
    DataItem, Purchaser, merge_data_item, merge_purchaser,
)


def _item() -> DataItem:
    return DataItem(
        id=DataItemId("1b4e28ba-2fa1-11d2-883f-0016d3cca427"), title="A",
        description="B", price=Nat64(5), seller=Principal("alice"),
        attachment_url="http://x", data_format="csv", status="active",
        quality="high", rating=Nat64(3),
    )


def _purchaser() -> Purchaser:
    return Purchaser(
        id=PurchaserId("2b4e28ba-2fa1-11d2-883f-0016d3cca427"),
        owner=Principal("bob"), name="Bob", price=Nat64(7), message="hi",
        purchased_item=[DataItemId("x")],
    )


def test_data_item_snapshot_round_trip():
    item = _item()
    assert DataItem.from_snapshot(item.to_snapshot()) == item


def test_purchaser_snapshot_copies_history():
    purchaser = _purchaser()
    snapshot = purchaser.to_snapshot()
    restored = Purchaser.from_snapshot(snapshot)
    restored.purchased_item.append("y")
    assert snapshot["purchased_item"] == ["x"]


def test_purchaser_snapshot_defaults_missing_history():
    restored = Purchaser.from_snapshot(
        {"id": "i", "owner": "o", "name": "n", "price": 1, "message": "m"},
    )
    assert restored.purchased_item == []


def test_merge_data_item_overwrites_payload_fields():
    merged = merge_data_item(_item(), {"title": "New", "rating": 9})
    assert merged.title == "New"
    assert merged.rating == 9
    assert merged.description == "B"


def test_merge_data_item_keeps_id_and_seller():
    original = _item()
    merged = merge_data_item(original, {"id": "other", "seller": "mallory"})
    assert merged.id == original.id
    assert merged.seller == "alice"


def test_merge_data_item_does_not_mutate_original():
    original = _item()
    merge_data_item(original, {"title": "New"})
    assert original.title == "A"


def test_merge_purchaser_keeps_protected_fields():
    original = _purchaser()
    merged = merge_purchaser(original, {
        "name": "Robert", "owner": "mallory", "purchased_item": [],
    })
    assert merged.name == "Robert"
    assert merged.owner == "bob"
    assert merged.purchased_item == ["x"]
    assert merged.purchased_item is not original.purchased_item


def test_snapshot_keeps_identity_values_as_plain_json():
    snapshot = _purchaser().to_snapshot()
    assert snapshot["id"] == "2b4e28ba-2fa1-11d2-883f-0016d3cca427"
    assert type(snapshot["owner"]) is str
    assert type(snapshot["price"]) is int
    assert Purchaser.from_snapshot(snapshot).purchased_item == [DataItemId("x")]
