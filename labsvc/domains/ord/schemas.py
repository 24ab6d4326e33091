# labsvc/domains/ord/schemas.py

"""
'ord' 도메인 (주문 관리)의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from pydantic import BaseModel, Field as PydanticField


# =============================================================================
# 1. 주문 (Order) 스키마
# =============================================================================
class OrderCreate(BaseModel):
    order_number: Optional[str] = PydanticField(None, max_length=64, description="주문 번호 (생략 시 UUID 자동 생성)")


class OrderUpdateRequest(BaseModel):
    order_id: int = PydanticField(description="수정할 주문 ID")
    order_number: str = PydanticField(max_length=64, description="주문 번호")


class OrderResponse(BaseModel):
    id: int
    order_number: str

    class Config:
        from_attributes = True


# =============================================================================
# 2. 주문 품목 (OrderLineItem) 스키마
# =============================================================================
class OrderLineItemBase(BaseModel):
    order_id: int = PydanticField(description="소속 주문 ID")
    sku_code: str = PydanticField(max_length=100, description="재고 관리 코드(SKU)")
    price: float = PydanticField(default=0, description="단가")
    quantity: int = PydanticField(default=0, description="주문 수량")


class OrderLineItemCreate(OrderLineItemBase):
    pass


class OrderLineItemUpdateRequest(OrderLineItemBase):  # 전체 덮어쓰기
    line_item_id: int = PydanticField(description="수정할 주문 품목 ID")


class OrderLineItemResponse(OrderLineItemBase):
    id: int

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str


class OrderMessageResponse(BaseModel):
    message: str
    order: Optional[OrderResponse] = None


class OrderLineItemMessageResponse(BaseModel):
    message: str
    line_item: Optional[OrderLineItemResponse] = None
