# labsvc/domains/ord/routers.py

"""
'ord' 도메인 (주문 관리) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from . import schemas as ord_schemas
from .services import (
    OrderLineItemService,
    OrderService,
    get_order_line_item_service,
    get_order_service,
)

router = APIRouter(
    tags=["Order Management (주문 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 주문 (Order) 라우터
# =============================================================================
@router.get("/orders", response_model=List[ord_schemas.OrderResponse], summary="모든 주문 조회")
async def read_orders(service: OrderService = Depends(get_order_service)):
    return await service.list_all()


@router.get("/orders/by-number/{order_number}", response_model=List[ord_schemas.OrderResponse], summary="주문 번호로 주문 조회")
async def read_orders_by_number(order_number: str, service: OrderService = Depends(get_order_service)):
    return await service.list_by_order_number(order_number)


@router.get("/orders/{order_id}", response_model=ord_schemas.OrderResponse, summary="특정 주문 조회")
async def read_order(order_id: int, service: OrderService = Depends(get_order_service)):
    return await service.get_by_id(order_id)


@router.post("/orders", response_model=ord_schemas.OrderResponse, status_code=status.HTTP_201_CREATED, summary="새 주문 생성")
async def create_order(order_in: ord_schemas.OrderCreate, service: OrderService = Depends(get_order_service)):
    return await service.create(order_in)


@router.put("/orders", response_model=ord_schemas.OrderMessageResponse, summary="주문 전체 수정")
async def update_order(request: ord_schemas.OrderUpdateRequest, service: OrderService = Depends(get_order_service)):
    updated = await service.update(request)
    return ord_schemas.OrderMessageResponse(
        message=f"Order having order_id : {request.order_id} Updated Successfully !!",
        order=ord_schemas.OrderResponse.model_validate(updated),
    )


@router.delete("/orders/{order_id}", response_model=ord_schemas.MessageResponse, summary="주문 삭제")
async def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """주문만 삭제합니다. 주문 품목은 별도로 삭제해야 합니다."""
    await service.delete(order_id)
    return ord_schemas.MessageResponse(message=f"Order having order_id : {order_id} Deleted Successfully !!")


# =============================================================================
# 2. 주문 품목 (OrderLineItem) 라우터
# =============================================================================
@router.get("/orders/{order_id}/line-items", response_model=List[ord_schemas.OrderLineItemResponse], summary="주문별 주문 품목 조회")
async def read_line_items_in_order(
    order_id: int, service: OrderLineItemService = Depends(get_order_line_item_service)
):
    return await service.list_by_order(order_id)


@router.get("/line-items", response_model=List[ord_schemas.OrderLineItemResponse], summary="모든 주문 품목 조회")
async def read_line_items(service: OrderLineItemService = Depends(get_order_line_item_service)):
    return await service.list_all()


@router.get("/line-items/{line_item_id}", response_model=ord_schemas.OrderLineItemResponse, summary="특정 주문 품목 조회")
async def read_line_item(line_item_id: int, service: OrderLineItemService = Depends(get_order_line_item_service)):
    return await service.get_by_id(line_item_id)


@router.post("/line-items", response_model=ord_schemas.OrderLineItemResponse, status_code=status.HTTP_201_CREATED, summary="새 주문 품목 생성")
async def create_line_item(
    line_item_in: ord_schemas.OrderLineItemCreate,
    service: OrderLineItemService = Depends(get_order_line_item_service),
):
    return await service.create(line_item_in)


@router.put("/line-items", response_model=ord_schemas.OrderLineItemMessageResponse, summary="주문 품목 전체 수정")
async def update_line_item(
    request: ord_schemas.OrderLineItemUpdateRequest,
    service: OrderLineItemService = Depends(get_order_line_item_service),
):
    updated = await service.update(request)
    return ord_schemas.OrderLineItemMessageResponse(
        message=f"Order line item having line_item_id : {request.line_item_id} Updated Successfully !!",
        line_item=ord_schemas.OrderLineItemResponse.model_validate(updated),
    )


@router.delete("/line-items/{line_item_id}", response_model=ord_schemas.MessageResponse, summary="주문 품목 삭제")
async def delete_line_item(line_item_id: int, service: OrderLineItemService = Depends(get_order_line_item_service)):
    await service.delete(line_item_id)
    return ord_schemas.MessageResponse(
        message=f"Order line item having line_item_id : {line_item_id} Deleted Successfully !!"
    )
