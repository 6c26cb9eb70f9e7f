"""DataItem Routes - listing CRUD, search, format filter and paging.

Invariants:
    - Static paths (/search, /filter, /initial, /more) registered before /{item_id}
    - item_id is a plain str so malformed ids reach the identifier validator (400, not 422)
    - Routes never contain business logic (delegate to MarketplaceService)
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from datamart.api.dependencies import get_caller, get_marketplace_service
from datamart.core.domain_types import NAT64_MAX, Principal
from datamart.schemas.marketplace import DataItemResponse, DeletedResponse
from datamart.services.marketplace import MarketplaceService

router = APIRouter(prefix="/api/v1/data-items", tags=["data-items"])


def _to_responses(items) -> list[DataItemResponse]:
    return [DataItemResponse.from_record(i) for i in items]


@router.get("", response_model=list[DataItemResponse])
async def list_data_items(
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return _to_responses(await service.list_data_items())


@router.get("/search", response_model=list[DataItemResponse])
async def search_data_items(
    query: str = Query(""),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    """Case-insensitive match on title or description."""
    return _to_responses(await service.search_data_items(query))


@router.get("/filter", response_model=list[DataItemResponse])
async def filter_data_items(
    query: str = Query(""),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    """Case-insensitive match on dataFormat."""
    return _to_responses(await service.filter_data_items(query))


@router.get("/initial", response_model=list[DataItemResponse])
async def get_initial_data_items(
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return _to_responses(await service.get_initial_data_items())


@router.get("/more", response_model=list[DataItemResponse])
async def get_more_data_items(
    start: int = Query(..., ge=0, le=NAT64_MAX),
    limit: int = Query(..., ge=0, le=NAT64_MAX),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return _to_responses(await service.get_more_data_items(start, limit))


@router.get("/{item_id}", response_model=DataItemResponse)
async def get_data_item(
    item_id: str,
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return DataItemResponse.from_record(await service.get_data_item(item_id))


@router.post(
    "", response_model=DataItemResponse, status_code=status.HTTP_201_CREATED,
)
async def add_data_item(
    payload: Any = Body(None),
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    item = await service.add_data_item(payload, caller)
    return DataItemResponse.from_record(item)


@router.put("/{item_id}", response_model=DataItemResponse)
async def update_data_item(
    item_id: str,
    payload: Any = Body(None),
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    item = await service.update_data_item(item_id, payload, caller)
    return DataItemResponse.from_record(item)


@router.delete("/{item_id}", response_model=DeletedResponse)
async def delete_data_item(
    item_id: str,
    caller: Principal = Depends(get_caller),
    service: MarketplaceService = Depends(get_marketplace_service),
):
    return DeletedResponse(id=await service.delete_data_item(item_id, caller))
