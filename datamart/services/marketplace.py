"""Marketplace Service - public operation surface over the DataItem and Purchaser stores.

Invariants:
    - Every id is format-checked before any store access
    - Every payload passes schema parsing, then domain validation, before any write
    - Only the stored seller/owner may update or delete a record
    - id and seller/owner never change after creation
    - Each operation returns a value or raises exactly one DatamartError subclass

Design Decisions:
    - Stores injected at construction: SQL stores in production, in-memory fakes in tests
    - caller passed explicitly to every mutating operation
    - Update check order: empty payload, id format, payload, lookup, ownership
"""

import logging
from typing import Any, Callable
from uuid import uuid4

from pydantic import BaseModel, ValidationError

from datamart.core.domain_types import DataItemId, Principal, PurchaserId
from datamart.core.errors import (
    AuthenticationFailedError, ErrorContext, InvalidPayloadError, NotFoundError,
)
from datamart.core.records import (
    DataItem, Purchaser, merge_data_item, merge_purchaser,
)
from datamart.core.repository_protocols import RecordStore
from datamart.core.search_listings import (
    INITIAL_PAGE_SIZE, filter_data_items, initial_data_items,
    page_data_items, search_data_items,
)
from datamart.core.validate_identifier import is_valid_uuid
from datamart.core.validate_payload import (
    validate_data_item_payload, validate_purchaser_payload,
)
from datamart.schemas.marketplace import DataItemPayload, PurchaserPayload

logger = logging.getLogger(__name__)

PURCHASED_ITEM_ADDED = "Item added to Purchaser"


def _new_id() -> str:
    return str(uuid4())


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict) or not payload:
        raise NotFoundError("invalid payload")
    return payload


def _require_uuid(value: str, label: str = "Id") -> None:
    if not is_valid_uuid(value):
        raise InvalidPayloadError(
            f'{label}="{value}" is not in the valid uuid format.',
            context=ErrorContext(record_id=value),
        )


def _format_schema_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(loc) for loc in e['loc']) or 'payload'}: {e['msg']}"
        for e in exc.errors()
    ]


def _parse_payload(
    payload: dict,
    schema: type[BaseModel],
    validate: Callable[[dict], list[str]],
) -> dict:
    """Schema parse + domain validation; all failures aggregated into one error."""
    try:
        parsed = schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidPayloadError.from_errors(_format_schema_errors(e))
    fields = parsed.model_dump()
    errors = validate(fields)
    if errors:
        raise InvalidPayloadError.from_errors(errors)
    return fields


class MarketplaceService:
    """CRUD, ownership checks, search and paging for DataItems and Purchasers."""

    def __init__(
        self,
        data_items: RecordStore[DataItem],
        purchasers: RecordStore[Purchaser],
        id_factory: Callable[[], str] = _new_id,
        initial_page_size: int = INITIAL_PAGE_SIZE,
    ):
        self._data_items = data_items
        self._purchasers = purchasers
        self._id_factory = id_factory
        self._initial_page_size = initial_page_size

    # ─── DataItems ───────────────────────────────────────────────

    async def list_data_items(self) -> list[DataItem]:
        return await self._data_items.values()

    async def get_data_item(self, item_id: DataItemId) -> DataItem:
        _require_uuid(item_id)
        item = await self._data_items.get(item_id)
        if item is None:
            raise NotFoundError(
                f"DataItem with id={item_id} not found",
                ErrorContext(record_id=item_id),
            )
        return item

    async def add_data_item(self, payload: Any, caller: Principal) -> DataItem:
        fields = _parse_payload(
            _require_object(payload), DataItemPayload, validate_data_item_payload,
        )
        item = DataItem(
            id=DataItemId(self._id_factory()), seller=caller, **fields,
        )
        await self._data_items.insert(item.id, item)
        logger.info(
            f"DataItem created: {item.title}",
            extra={"record_id": item.id, "caller": caller},
        )
        return item

    async def update_data_item(
        self, item_id: DataItemId, payload: Any, caller: Principal,
    ) -> DataItem:
        payload = _require_object(payload)
        _require_uuid(item_id)
        fields = _parse_payload(
            payload, DataItemPayload, validate_data_item_payload,
        )
        existing = await self._data_items.get(item_id)
        if existing is None:
            raise NotFoundError(
                f"cannot update the DataItem: DataItem with id={item_id} not found",
                ErrorContext(record_id=item_id),
            )
        self._check_owner(existing.seller, caller, item_id, "seller of the item")
        updated = merge_data_item(existing, fields)
        await self._data_items.insert(item_id, updated)
        logger.info(
            "DataItem updated", extra={"record_id": item_id, "caller": caller},
        )
        return updated

    async def delete_data_item(
        self, item_id: DataItemId, caller: Principal,
    ) -> DataItemId:
        _require_uuid(item_id)
        existing = await self._data_items.get(item_id)
        if existing is None:
            raise NotFoundError(
                f"cannot delete the DataItem: DataItem with id={item_id} not found",
                ErrorContext(record_id=item_id),
            )
        self._check_owner(existing.seller, caller, item_id, "seller of the item")
        await self._data_items.remove(item_id)
        logger.info(
            "DataItem deleted", extra={"record_id": item_id, "caller": caller},
        )
        return existing.id

    async def search_data_items(self, query: str) -> list[DataItem]:
        return search_data_items(await self._data_items.values(), query)

    async def filter_data_items(self, query: str) -> list[DataItem]:
        return filter_data_items(await self._data_items.values(), query)

    async def get_initial_data_items(self) -> list[DataItem]:
        return initial_data_items(
            await self._data_items.values(), self._initial_page_size,
        )

    async def get_more_data_items(self, start: int, limit: int) -> list[DataItem]:
        if start < 0 or limit < 0:
            raise InvalidPayloadError(
                f"start={start} and limit={limit} must be non-negative.",
            )
        return page_data_items(await self._data_items.values(), start, limit)

    # ─── Purchasers ──────────────────────────────────────────────

    async def list_purchasers(self) -> list[Purchaser]:
        return await self._purchasers.values()

    async def get_purchaser(self, purchaser_id: PurchaserId) -> Purchaser:
        _require_uuid(purchaser_id)
        purchaser = await self._purchasers.get(purchaser_id)
        if purchaser is None:
            raise NotFoundError(
                f"Purchaser with id={purchaser_id} not found",
                ErrorContext(record_id=purchaser_id),
            )
        return purchaser

    async def add_purchaser(self, payload: Any, caller: Principal) -> Purchaser:
        fields = _parse_payload(
            _require_object(payload), PurchaserPayload, validate_purchaser_payload,
        )
        purchaser = Purchaser(
            id=PurchaserId(self._id_factory()), owner=caller,
            purchased_item=[], **fields,
        )
        await self._purchasers.insert(purchaser.id, purchaser)
        logger.info(
            f"Purchaser created: {purchaser.name}",
            extra={"record_id": purchaser.id, "caller": caller},
        )
        return purchaser

    async def update_purchaser(
        self, purchaser_id: PurchaserId, payload: Any, caller: Principal,
    ) -> Purchaser:
        payload = _require_object(payload)
        _require_uuid(purchaser_id)
        fields = _parse_payload(
            payload, PurchaserPayload, validate_purchaser_payload,
        )
        existing = await self._load_owned_purchaser(purchaser_id, caller, "update")
        updated = merge_purchaser(existing, fields)
        await self._purchasers.insert(purchaser_id, updated)
        logger.info(
            "Purchaser updated",
            extra={"record_id": purchaser_id, "caller": caller},
        )
        return updated

    async def delete_purchaser(
        self, purchaser_id: PurchaserId, caller: Principal,
    ) -> PurchaserId:
        _require_uuid(purchaser_id)
        existing = await self._load_owned_purchaser(purchaser_id, caller, "delete")
        await self._purchasers.remove(purchaser_id)
        logger.info(
            "Purchaser deleted",
            extra={"record_id": purchaser_id, "caller": caller},
        )
        return existing.id

    async def add_purchased_item(
        self, purchaser_id: PurchaserId, item_id: DataItemId, caller: Principal,
    ) -> str:
        """Append item_id to the purchaser's history. item_id need not exist."""
        _require_uuid(purchaser_id, "purchaserId")
        _require_uuid(item_id, "itemId")
        purchaser = await self._load_owned_purchaser(
            purchaser_id, caller, "add a purchased item to",
        )
        purchaser.purchased_item.append(item_id)
        await self._purchasers.insert(purchaser_id, purchaser)
        logger.info(
            f"Purchased item {item_id} recorded",
            extra={"record_id": purchaser_id, "caller": caller},
        )
        return PURCHASED_ITEM_ADDED

    # ─── Helpers ─────────────────────────────────────────────────

    async def _load_owned_purchaser(
        self, purchaser_id: PurchaserId, caller: Principal, action: str,
    ) -> Purchaser:
        existing = await self._purchasers.get(purchaser_id)
        if existing is None:
            raise NotFoundError(
                f"cannot {action} the Purchaser: "
                f"Purchaser with id={purchaser_id} not found",
                ErrorContext(record_id=purchaser_id),
            )
        self._check_owner(existing.owner, caller, purchaser_id, "purchaser")
        return existing

    @staticmethod
    def _check_owner(
        owner: Principal, caller: Principal, record_id: str, role: str,
    ) -> None:
        if owner != caller:
            logger.warning(
                "Ownership check failed",
                extra={"record_id": record_id, "caller": caller},
            )
            raise AuthenticationFailedError(
                f"Caller is not the {role}.",
                ErrorContext(record_id=record_id, caller=caller),
            )
