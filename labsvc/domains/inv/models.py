# labsvc/domains/inv/models.py

"""
'inv' 도메인 (PostgreSQL 'inv' 스키마)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. inv.inventory_items 테이블 모델
# =============================================================================
class InventoryItemBase(SQLModel):
    sku_code: str = Field(max_length=100, index=True, description="재고 관리 코드(SKU)")
    quantity: int = Field(default=0, description="재고 수량")


class InventoryItem(InventoryItemBase, table=True):
    __tablename__ = "inventory_items"
    __table_args__ = {'schema': 'inv'}

    id: Optional[int] = Field(default=None, primary_key=True)
