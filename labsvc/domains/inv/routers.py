# labsvc/domains/inv/routers.py

"""
'inv' 도메인 (재고 관리) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from . import schemas as inv_schemas
from .services import InventoryService, get_inventory_service

router = APIRouter(
    tags=["Inventory Management (재고 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/working", summary="재고 서비스 동작 확인")
async def working() -> str:
    return "Working"


# =============================================================================
# 1. 재고 확인 라우터
# =============================================================================
@router.get("/stock", response_model=List[inv_schemas.StockStatus], summary="SKU별 재고 여부 조회")
async def read_stock(
    sku_code: List[str] = Query(..., description="조회할 SKU 코드 (반복 지정 가능)"),
    service: InventoryService = Depends(get_inventory_service),
):
    """`?sku_code=a&sku_code=b` 형태로 여러 SKU의 재고 여부를 한 번에 조회합니다."""
    return await service.check_stock(sku_code)


# =============================================================================
# 2. 재고 품목 (InventoryItem) 라우터
# =============================================================================
@router.get("/items", response_model=List[inv_schemas.InventoryItemResponse], summary="모든 재고 품목 조회")
async def read_items(service: InventoryService = Depends(get_inventory_service)):
    return await service.list_all()


@router.get("/items/by-sku/{sku_code}", response_model=List[inv_schemas.InventoryItemResponse], summary="SKU로 재고 품목 조회")
async def read_items_by_sku(sku_code: str, service: InventoryService = Depends(get_inventory_service)):
    return await service.list_by_sku(sku_code)


@router.get("/items/{item_id}", response_model=inv_schemas.InventoryItemResponse, summary="특정 재고 품목 조회")
async def read_item(item_id: int, service: InventoryService = Depends(get_inventory_service)):
    return await service.get_by_id(item_id)


@router.post("/items", response_model=inv_schemas.InventoryItemResponse, status_code=status.HTTP_201_CREATED, summary="새 재고 품목 생성")
async def create_item(
    item_in: inv_schemas.InventoryItemCreate,
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.create(item_in)


@router.put("/items", response_model=inv_schemas.InventoryItemMessageResponse, summary="재고 품목 전체 수정")
async def update_item(
    request: inv_schemas.InventoryItemUpdateRequest,
    service: InventoryService = Depends(get_inventory_service),
):
    updated = await service.update(request)
    return inv_schemas.InventoryItemMessageResponse(
        message=f"Inventory item having item_id : {request.item_id} Updated Successfully !!",
        item=inv_schemas.InventoryItemResponse.model_validate(updated),
    )


@router.delete("/items/{item_id}", response_model=inv_schemas.MessageResponse, summary="재고 품목 삭제")
async def delete_item(item_id: int, service: InventoryService = Depends(get_inventory_service)):
    await service.delete(item_id)
    return inv_schemas.MessageResponse(message=f"Inventory item having item_id : {item_id} Deleted Successfully !!")
