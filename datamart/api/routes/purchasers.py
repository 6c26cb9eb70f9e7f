"""Purchaser Routes - buyer profile CRUD and purchase recording."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from datamart.api.dependencies import get_caller, get_marketplace_service
from datamart.core.domain_types import Principal
from datamart.schemas.marketplace import (
    DeletedResponse, MessageResponse, PurchaserResponse,
)
from datamart.services.marketplace import MarketplaceService

router = APIRouter(prefix="/api/v1/purchasers", tags=["purchasers"])


@router.get("", response_model=list[PurchaserResponse])
async def list_purchasers(
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return [
        PurchaserResponse.from_record(p) for p in await service.list_purchasers()
    ]


@router.get("/{purchaser_id}", response_model=PurchaserResponse)
async def get_purchaser(
    purchaser_id: str,
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return PurchaserResponse.from_record(await service.get_purchaser(purchaser_id))


@router.post(
    "", response_model=PurchaserResponse, status_code=status.HTTP_201_CREATED,
)
async def add_purchaser(
    payload: Any = Body(None),
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    purchaser = await service.add_purchaser(payload, caller)
    return PurchaserResponse.from_record(purchaser)


@router.put("/{purchaser_id}", response_model=PurchaserResponse)
async def update_purchaser(
    purchaser_id: str,
    payload: Any = Body(None),
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    purchaser = await service.update_purchaser(purchaser_id, payload, caller)
    return PurchaserResponse.from_record(purchaser)


@router.delete("/{purchaser_id}", response_model=DeletedResponse)
async def delete_purchaser(
    purchaser_id: str,
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return DeletedResponse(id=await service.delete_purchaser(purchaser_id, caller))


@router.post(
    "/{purchaser_id}/purchased-items/{item_id}", response_model=MessageResponse,
)
async def add_purchased_item(
    purchaser_id: str,
    item_id: str,
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    """Record a purchase. The item id is not checked against DataItems."""
    message = await service.add_purchased_item(purchaser_id, item_id, caller)
    return MessageResponse(message=message)
