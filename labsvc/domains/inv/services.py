# labsvc/domains/inv/services.py

"""
'inv' 도메인의 재고 품목 서비스 모듈입니다.
"""

from typing import Iterable, List

from fastapi import Depends

from labsvc.core import dependencies as deps
from labsvc.core.events import EventSink
from labsvc.core.service import EntityService

from . import models as inv_models
from . import schemas as inv_schemas


class InventoryService(EntityService[inv_models.InventoryItem, inv_schemas.InventoryItemCreate, inv_schemas.InventoryItemUpdateRequest]):
    model = inv_models.InventoryItem
    update_id_field = "item_id"
    event_prefix = "inventory_item"
    entity_name = "Inventory item"
    secondary_key = "sku_code"

    async def list_by_sku(self, sku_code: str) -> List[inv_models.InventoryItem]:
        return await self.list_by_secondary_key(sku_code)

    async def check_stock(self, sku_codes: Iterable[str]) -> List[inv_schemas.StockStatus]:
        """
        요청한 SKU 중 저장소에 있는 품목마다 재고 여부(수량 > 0)를 반환합니다.
        저장소에 없는 SKU는 결과에서 제외됩니다.
        """
        sku_codes = list(sku_codes)
        self._emit("check_stock", sku_codes=sku_codes)
        items = await self.store.find_by_secondary_keys(sku_codes)
        return [
            inv_schemas.StockStatus(sku_code=item.sku_code, is_in_stock=item.quantity > 0)
            for item in items
        ]


def get_inventory_service(
    stores: deps.StoreFactory = Depends(deps.get_store_factory),
    events: EventSink = Depends(deps.get_event_sink),
) -> InventoryService:
    return InventoryService(stores(InventoryService.model, InventoryService.secondary_key), events)
