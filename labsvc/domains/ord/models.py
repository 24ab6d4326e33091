# labsvc/domains/ord/models.py

"""
'ord' 도메인 (PostgreSQL 'ord' 스키마)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. ord.orders 테이블 모델
# =============================================================================
class Order(SQLModel, table=True):
    __tablename__ = "orders"
    __table_args__ = {'schema': 'ord'}

    id: Optional[int] = Field(default=None, primary_key=True)
    order_number: str = Field(max_length=64, index=True, description="주문 번호")


# =============================================================================
# 2. ord.order_line_items 테이블 모델
# =============================================================================
class OrderLineItemBase(SQLModel):
    order_id: int = Field(index=True, description="소속 주문 ID (FK 제약 없음)")
    sku_code: str = Field(max_length=100, description="재고 관리 코드(SKU)")
    price: float = Field(default=0, description="단가")
    quantity: int = Field(default=0, description="주문 수량")


class OrderLineItem(OrderLineItemBase, table=True):
    __tablename__ = "order_line_items"
    __table_args__ = {'schema': 'ord'}

    id: Optional[int] = Field(default=None, primary_key=True)
