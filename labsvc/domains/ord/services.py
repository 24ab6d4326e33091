# labsvc/domains/ord/services.py

"""
'ord' 도메인의 주문/주문 품목 서비스 모듈입니다.
주문과 주문 품목은 각각 독립적으로 저장되며, 둘을 묶는 트랜잭션은 없습니다.
"""

import uuid
from typing import List

from fastapi import Depends

from labsvc.core import dependencies as deps
from labsvc.core.events import EventSink
from labsvc.core.service import EntityService

from . import models as ord_models
from . import schemas as ord_schemas


# =============================================================================
# 1. 주문 (Order) 서비스
# =============================================================================
class OrderService(EntityService[ord_models.Order, ord_schemas.OrderCreate, ord_schemas.OrderUpdateRequest]):
    model = ord_models.Order
    update_id_field = "order_id"
    event_prefix = "order"
    entity_name = "Order"
    secondary_key = "order_number"

    def build_new(self, obj_in: ord_schemas.OrderCreate) -> ord_models.Order:
        # 주문 번호가 없으면 UUID로 발급합니다.
        return ord_models.Order(order_number=obj_in.order_number or str(uuid.uuid4()))

    async def list_by_order_number(self, order_number: str) -> List[ord_models.Order]:
        return await self.list_by_secondary_key(order_number)


# =============================================================================
# 2. 주문 품목 (OrderLineItem) 서비스
# =============================================================================
class OrderLineItemService(EntityService[ord_models.OrderLineItem, ord_schemas.OrderLineItemCreate, ord_schemas.OrderLineItemUpdateRequest]):
    model = ord_models.OrderLineItem
    update_id_field = "line_item_id"
    event_prefix = "order_line_item"
    entity_name = "Order line item"
    secondary_key = "order_id"

    async def list_by_order(self, order_id: int) -> List[ord_models.OrderLineItem]:
        return await self.list_by_secondary_key(order_id)


def get_order_service(
    stores: deps.StoreFactory = Depends(deps.get_store_factory),
    events: EventSink = Depends(deps.get_event_sink),
) -> OrderService:
    return OrderService(stores(OrderService.model, OrderService.secondary_key), events)


def get_order_line_item_service(
    stores: deps.StoreFactory = Depends(deps.get_store_factory),
    events: EventSink = Depends(deps.get_event_sink),
) -> OrderLineItemService:
    return OrderLineItemService(stores(OrderLineItemService.model, OrderLineItemService.secondary_key), events)
