# labsvc/domains/inv/schemas.py

"""
'inv' 도메인 (재고 관리)의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from pydantic import BaseModel, Field as PydanticField


# =============================================================================
# 1. 재고 품목 (InventoryItem) 스키마
# =============================================================================
class InventoryItemBase(BaseModel):
    sku_code: str = PydanticField(max_length=100, description="재고 관리 코드(SKU)")
    quantity: int = PydanticField(default=0, description="재고 수량")


class InventoryItemCreate(InventoryItemBase):
    pass


class InventoryItemUpdateRequest(InventoryItemBase):  # 전체 덮어쓰기
    item_id: int = PydanticField(description="수정할 재고 품목 ID")


class InventoryItemResponse(InventoryItemBase):
    id: int = PydanticField(description="재고 품목 고유 ID")

    class Config:
        from_attributes = True


# =============================================================================
# 2. 재고 확인 (Stock) 스키마
# =============================================================================
class StockStatus(BaseModel):
    sku_code: str
    is_in_stock: bool


class MessageResponse(BaseModel):
    message: str


class InventoryItemMessageResponse(BaseModel):
    message: str
    item: Optional[InventoryItemResponse] = None
