from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.inventory import (
    create_inventory_item,
    get_inventory_item,
    list_inventory_items,
    update_inventory_item,
)
from src.domain.models.inventory_item import InventoryCategory
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("", response_model=list[InventoryItemResponse])
async def list_inventory_endpoint(
    category: InventoryCategory | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[InventoryItemResponse]:
    items = await list_inventory_items.execute(
        uow, category=category.value if category else None
    )
    return [InventoryItemResponse.model_validate(item) for item in items]


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_endpoint(
    payload: InventoryItemCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> InventoryItemResponse:
    item = await create_inventory_item.execute(
        uow,
        context.role,
        context.user_id,
        create_inventory_item.CreateInventoryItemInput(**payload.model_dump()),
    )
    return InventoryItemResponse.model_validate(item)


@router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_inventory_endpoint(
    item_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> InventoryItemResponse:
    item = await get_inventory_item.execute(uow, item_id)
    return InventoryItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=InventoryItemResponse)
async def update_inventory_endpoint(
    item_id: UUID,
    payload: InventoryItemUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> InventoryItemResponse:
    item = await update_inventory_item.execute(
        uow,
        context.role,
        item_id,
        update_inventory_item.UpdateInventoryItemInput(**payload.model_dump()),
    )
    return InventoryItemResponse.model_validate(item)
